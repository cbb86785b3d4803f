"""Protocols (interfaces) consumed by the core layer.

These define the contracts that commands and output sinks must
satisfy.  The dispatcher depends ONLY on these protocols — never on
concrete command classes or stream types.
"""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from zk.core.environment import Environment


class OutputSink(Protocol):
    """Anything text can be written to (``sys.stdout``, ``io.StringIO``…).

    ``flush()`` is optional; :class:`~zk.core.environment.Environment`
    only calls it when the sink provides one.
    """

    def write(self, text: str, /) -> object:
        """Write *text* and return a provider-specific value (ignored)."""
        ...  # pragma: no cover


class Command(Protocol):
    """Contract for a dispatchable unit of work.

    Any class whose instances expose the attributes and methods below
    satisfies this protocol structurally (no explicit inheritance
    required).  The registry instantiates command classes with no
    arguments, so construction must not depend on parsed options.
    """

    name: str
    """Subcommand token typed by the user; unique per application."""

    summary: str
    """One-line description shown in the top-level help."""

    def build_arg_grammar(self) -> argparse.ArgumentParser:
        """Return this command's argument grammar fragment.

        The fragment must be created with ``add_help=False``; the
        adapter attaches it under :attr:`name` and adds ``-h/--help``
        itself.
        """
        ...  # pragma: no cover

    def run(self, env: Environment, options: argparse.Namespace) -> None:
        """Perform the command, writing any output through *env*.

        Parameters
        ----------
        env:
            The application's environment wrapping the output sink.
        options:
            The values parsed from this command's own grammar fragment.

        Raises
        ------
        CommandExecutionError
            Any subclass, when the command cannot complete.
        """
        ...  # pragma: no cover
