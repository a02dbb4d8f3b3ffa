"""Allow ``python -m tubefetch`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m tubefetch`` behaves identically to the ``tubefetch``
console script.
"""

from __future__ import annotations

from tubefetch.cli.app import cli

if __name__ == "__main__":
    cli()
