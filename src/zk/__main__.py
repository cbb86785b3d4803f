"""Allow ``python -m zk`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m zk`` behaves identically to the ``zk_cli`` console
script.
"""

from __future__ import annotations

from zk.cli.app import cli

if __name__ == "__main__":
    cli()
