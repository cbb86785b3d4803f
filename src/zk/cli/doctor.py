"""``zk_cli doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether the
runtime environment satisfies zk-cli's requirements.  Output goes
through the command :class:`~zk.core.environment.Environment`, as a Rich
table when Rich is installed and as plain text otherwise.
"""

from __future__ import annotations

import argparse
import platform
import sys
from pathlib import Path

from zk.core.command import BaseCommand
from zk.core.environment import Environment
from zk.exceptions import CommandFailedError
from zk.infra.config_file import default_config_path, probe_config
from zk.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _pyyaml_version_check() -> Check:
    """Return (label, value, status) for the PyYAML row."""
    try:
        import yaml
    except ImportError:
        return "PyYAML", "NOT INSTALLED", "[red]FAIL[/red]"
    return "PyYAML", getattr(yaml, "__version__", "unknown"), "[green]OK[/green]"


def _config_check(path: Path | None) -> Check:
    """Return (label, value, status) for the configuration row.

    A missing or broken configuration is a warning: the dispatcher
    itself does not need it.
    """
    status_obj = probe_config(path)
    if status_obj.ok:
        return "Config", f"{status_obj.path} -> {status_obj.working_dir}", "[green]OK[/green]"
    return "Config", f"{status_obj.path} ({status_obj.problem})", "[yellow]WARN[/yellow]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _zk_version_check() -> Check:
    """Return (label, value, status) for the zk-cli version row."""
    return "zk-cli", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def collect_checks(config_path: Path | None = None) -> list[Check]:
    return [
        _zk_version_check(),
        _python_version_check(),
        _pyyaml_version_check(),
        _config_check(config_path),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class _EnvironmentFile:
    """File-like view of an Environment, so Rich writes through it."""

    def __init__(self, env: Environment) -> None:
        self._env = env

    def write(self, text: str) -> int:
        self._env.write(text)
        return len(text)

    def flush(self) -> None:
        self._env.flush()


def _render_plain(env: Environment, checks: list[Check]) -> None:
    env.writeln()
    env.writeln("zk-cli doctor")
    env.writeln("=" * 64)
    env.writeln(f"{'Component':<12} {'Value':<40} {'Status':<8}")
    env.writeln("-" * 64)
    for label, value, status in checks:
        env.writeln(f"{label:<12} {value:<40} {_status_plain(status):<8}")
    env.writeln()


def _render_rich(env: Environment, checks: list[Check]) -> bool:
    """Render *checks* as a Rich table.  Returns ``False`` without Rich."""
    try:
        from rich.console import Console
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(
        title="zk-cli doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(escape(label), escape(value), status)

    console = Console(file=_EnvironmentFile(env), width=100)
    console.print()
    console.print(table)
    console.print()
    return True


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class DoctorCommand(BaseCommand):
    """Report whether the runtime environment is usable."""

    name = "doctor"
    summary = "Check the runtime environment and configuration."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--config",
            type=Path,
            default=None,
            metavar="PATH",
            help="Configuration file to check (default: %s)."
            % str(default_config_path()).replace("%", "%%"),
        )
        parser.add_argument(
            "--plain",
            action="store_true",
            help="Render a plain-text table even when Rich is installed.",
        )

    def run(self, env: Environment, options: argparse.Namespace) -> None:
        checks = collect_checks(options.config)
        if options.plain or not _render_rich(env, checks):
            _render_plain(env, checks)

        if any("FAIL" in status for _, _, status in checks):
            env.writeln("Some checks failed.")
            raise CommandFailedError(
                "Some doctor checks failed.",
                hint="Fix the rows marked FAIL and run 'zk_cli doctor' again.",
            )
        env.writeln("All checks passed.")
        env.flush()
