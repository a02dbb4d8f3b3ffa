"""CLI layer — argument parsing, prompts, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``utils``; no other layer may import from
``cli``.
"""
