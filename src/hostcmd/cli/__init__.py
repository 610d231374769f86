"""CLI layer: the command driver, usage output and the process boundary.

This package is the outermost layer.  It may import from ``core`` and
``infra``, but no other layer may import from ``cli``.
"""
