"""Logging configuration for the zk-cli process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are installed here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "ZK_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown or empty names fall back to :data:`DEFAULT_LEVEL`.
    """
    if not value:
        return DEFAULT_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def configure_logging(level: int | str | None = None) -> int:
    """Install a stderr handler on the ``zk`` logger.

    *level* defaults to ``$ZK_LOG_LEVEL``.  Uses Rich's handler when Rich
    is installed.  Calling this more than once replaces the handler.

    Returns
    -------
    int
        The effective numeric level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)
    numeric = level if isinstance(level, int) else resolve_level(level)

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"),
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("zk")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric)
    return numeric
