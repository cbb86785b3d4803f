"""CLI application entry point for zk-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~zk.exceptions.ZkError`, ``KeyboardInterrupt``, and
any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — argument parsing and dispatch belong
  to :class:`~zk.core.application.Application`.
* Process globals (``sys.argv``, ``sys.stdout``) are read here and
  injected into the application, never accessed by the core.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from zk.cli import exit_codes
from zk.cli.console import console, escape
from zk.cli.doctor import DoctorCommand
from zk.cli.logging_setup import configure_logging
from zk.core.application import Application
from zk.core.protocols import Command, OutputSink
from zk.exceptions import ArgumentParsingError, ZkError

DEFAULT_COMMANDS: tuple[type[Command], ...] = (
    DoctorCommand,
)
"""Commands registered by :func:`build_application`, in order."""


# ---------------------------------------------------------------------------
# Application wiring
# ---------------------------------------------------------------------------

def build_application(
    argv: Sequence[str],
    output: OutputSink,
    commands: Sequence[type[Command]] = DEFAULT_COMMANDS,
) -> Application:
    """Create an :class:`Application` with *commands* registered."""
    app = Application(argv, output)
    for command_cls in commands:
        app.add_command(command_cls)
    return app


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None, output: OutputSink | None = None) -> int:
    """Run the zk-cli application.

    Parameters
    ----------
    argv:
        Full argument vector, program name first.  When ``None``
        (default), ``sys.argv`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.
    output:
        Sink for command output.  Defaults to ``sys.stdout``.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ZkError
        Any parsing, dispatch or command failure, for :func:`cli` to render.
    """
    app = build_application(
        sys.argv if argv is None else argv,
        sys.stdout if output is None else output,
    )
    app.run()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_parsing_error(exc: ArgumentParsingError) -> int:
    if exc.is_help:
        sys.stdout.write(str(exc))
        return exit_codes.SUCCESS
    sys.stderr.write(exc.usage)
    sys.stderr.write(f"{exc}\n")
    if exc.hint:
        sys.stderr.write(f"hint: {exc.hint}\n")
    return exit_codes.USAGE_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    configure_logging()
    try:
        code = main()
        sys.exit(code)
    except ArgumentParsingError as exc:
        sys.exit(_report_parsing_error(exc))
    except ZkError as exc:
        console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
