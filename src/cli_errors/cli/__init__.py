"""CLI layer — console output, exit codes, and the ``cli-errors`` command.

This package is the outermost layer.  It may import from ``core`` and
``infra``, but neither of those may import from ``cli``.
"""
