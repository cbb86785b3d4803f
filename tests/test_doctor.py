"""Tests for the ``zk_cli doctor`` command (cli/doctor.py).

The configuration file is redirected to ``tmp_path`` by the autouse
``isolated_config`` fixture — no dependency on the real home directory.

Coverage:
* Individual check functions return correct tuples.
* The command renders through the environment (Rich and plain).
* A failing check raises ``CommandFailedError``.
* Dispatch through the application.
"""

from __future__ import annotations

import argparse
import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from zk.cli import exit_codes
from zk.cli.app import main
from zk.cli.doctor import (
    DoctorCommand,
    _config_check,
    _os_check,
    _pyyaml_version_check,
    _python_version_check,
    _status_plain,
    _zk_version_check,
)
from zk.core.environment import Environment
from zk.exceptions import CommandFailedError
from zk.version import __version__


def _options(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {"config": None, "plain": True}
    values.update(overrides)
    return argparse.Namespace(**values)


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestChecks:
    def test_python_version(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status

    def test_pyyaml_installed(self) -> None:
        label, _value, status = _pyyaml_version_check()
        assert label == "PyYAML"
        assert "OK" in status

    @patch.dict("sys.modules", {"yaml": None})
    def test_pyyaml_missing(self) -> None:
        _label, value, status = _pyyaml_version_check()
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    def test_config_missing_is_warning(self, isolated_config: Path) -> None:
        label, value, status = _config_check(None)
        assert label == "Config"
        assert str(isolated_config) in value
        assert "WARN" in status

    def test_config_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("working_dir: /notes\n", encoding="utf-8")
        _label, value, status = _config_check(path)
        assert "/notes" in value
        assert "OK" in status

    @patch("zk.cli.doctor.platform.machine", return_value="arm64")
    @patch("zk.cli.doctor.platform.release", return_value="23.4.0")
    @patch("zk.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"

    def test_zk_version(self) -> None:
        assert _zk_version_check() == ("zk-cli", __version__, "[green]OK[/green]")

    @pytest.mark.parametrize(
        ("markup", "plain"),
        [
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[green]OK[/green]", "OK"),
            ("other", "other"),
        ],
    )
    def test_status_plain(self, markup: str, plain: str) -> None:
        assert _status_plain(markup) == plain


# ---------------------------------------------------------------------------
# Command behaviour
# ---------------------------------------------------------------------------

class TestDoctorCommand:
    def test_plain_output_goes_to_environment(
        self, output: io.StringIO, capsys: pytest.CaptureFixture[str]
    ) -> None:
        DoctorCommand().run(Environment(output), _options())
        text = output.getvalue()
        assert "zk-cli doctor" in text
        assert "PyYAML" in text
        assert "WARN" in text
        assert text.rstrip().endswith("All checks passed.")
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_rich_output_goes_to_environment(self, output: io.StringIO) -> None:
        DoctorCommand().run(Environment(output), _options(plain=False))
        text = output.getvalue()
        assert "zk-cli doctor" in text
        assert "Component" in text
        assert "[green]" not in text

    @patch.dict("sys.modules", {"rich": None, "rich.console": None, "rich.table": None})
    def test_falls_back_to_plain_without_rich(self, output: io.StringIO) -> None:
        DoctorCommand().run(Environment(output), _options(plain=False))
        assert "=" * 64 in output.getvalue()

    @patch("zk.cli.doctor._python_version_check")
    def test_failed_check_raises(
        self, mock_check: MagicMock, output: io.StringIO
    ) -> None:
        mock_check.return_value = ("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]")
        with pytest.raises(CommandFailedError, match="checks failed"):
            DoctorCommand().run(Environment(output), _options())
        assert "Some checks failed." in output.getvalue()

    def test_grammar_options(self) -> None:
        grammar = DoctorCommand().build_arg_grammar()
        options = grammar.parse_args(["--config", "x.yaml", "--plain"])
        assert options.config == Path("x.yaml")
        assert options.plain is True


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    def test_config_flag_is_forwarded(
        self, tmp_path: Path, output: io.StringIO
    ) -> None:
        path = tmp_path / "other.yaml"
        path.write_text("working_dir: /elsewhere\n", encoding="utf-8")
        code = main(["zk_cli", "doctor", "--plain", "--config", str(path)], output)
        assert code == exit_codes.SUCCESS
        assert "/elsewhere" in output.getvalue()
