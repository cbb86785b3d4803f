"""Infrastructure: configuration file discovery and loading.

This module is responsible for locating the zk-cli configuration file
and reading it from disk.  Parsing is delegated to
:meth:`zk.core.config.Config.from_str`.

Rules
-----
* Lookup order: ``$ZK_CONFIG``, then ``$XDG_CONFIG_HOME/zk/config.yaml``,
  then ``~/.config/zk/config.yaml``.
* No file is ever created or modified.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from zk.core.config import Config
from zk.exceptions import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ZK_CONFIG"
CONFIG_FILE_NAME = "config.yaml"


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConfigStatus:
    """Result of a configuration probe.

    Attributes
    ----------
    found : bool
        Whether the configuration file exists.
    path : Path
        The path that was probed.
    working_dir : str | None
        The configured working directory, when the file parsed cleanly.
    problem : str | None
        Human-readable description of what is wrong, or ``None``.
    """

    found: bool
    path: Path
    working_dir: str | None
    problem: str | None

    @property
    def ok(self) -> bool:
        return self.found and self.problem is None


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def default_config_path() -> Path:
    """Return the configuration path for the current environment."""
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
    return base / "zk" / CONFIG_FILE_NAME


def load_config(path: Path | None = None) -> Config:
    """Read and parse the configuration file.

    Raises
    ------
    ConfigNotFoundError
        When the file does not exist or cannot be read.
    ConfigError
        Any parsing error raised by :meth:`Config.from_str`.
    """
    resolved = path if path is not None else default_config_path()
    logger.debug("Loading configuration from %s", resolved)
    try:
        text = resolved.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(
            f"Configuration file not found: {resolved}",
            hint=f"Create it with a 'working_dir' entry, or set {CONFIG_ENV_VAR}.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigNotFoundError(
            f"Configuration file cannot be read: {resolved} ({exc})",
        ) from exc
    return Config.from_str(text)


def probe_config(path: Path | None = None) -> ConfigStatus:
    """Inspect the configuration file without raising for config problems.

    Returns a :class:`ConfigStatus` regardless of the outcome — the
    caller decides whether to abort or merely warn.
    """
    resolved = path if path is not None else default_config_path()
    if not resolved.is_file():
        return ConfigStatus(
            found=False,
            path=resolved,
            working_dir=None,
            problem="not found",
        )
    try:
        config = load_config(resolved)
    except ConfigError as exc:
        return ConfigStatus(
            found=True,
            path=resolved,
            working_dir=None,
            problem=str(exc),
        )
    return ConfigStatus(
        found=True,
        path=resolved,
        working_dir=config.working_dir,
        problem=None,
    )
