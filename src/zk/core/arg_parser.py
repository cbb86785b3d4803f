"""Argument-parser adapter built on :mod:`argparse`.

Holds the top-level grammar (program description plus one subparser
per registered command) and turns raw argument tokens into a selected
subcommand name and that subcommand's parsed options.

Guarantees
----------
* Never prints and never calls :func:`sys.exit` — every failure,
  including ``--help`` and ``--version``, raises
  :class:`~zk.exceptions.ArgumentParsingError`.
* Command fragments are attached in place; the top-level parser is
  never rebuilt or copied.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, Any, NoReturn

from zk.exceptions import ArgumentParsingError, DuplicateCommandError, InvalidCommandError

logger = logging.getLogger(__name__)

_COMMAND_DEST = "zk_command"
_HELP_FLAGS = frozenset({"-h", "--help"})


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Outcome of a successful parse."""

    command: str | None
    """Selected subcommand name, or ``None`` if none was supplied."""

    options: argparse.Namespace
    """Option values of the selected subcommand only."""


# ---------------------------------------------------------------------------
# Non-exiting parser
# ---------------------------------------------------------------------------

class _RaisingArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of printing and exiting.

    Subparsers inherit this class, so errors raised while parsing a
    subcommand's own options are reported the same way.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._captured: list[str] = []

    def _print_message(self, message: str, file: IO[str] | None = None) -> None:
        # Help and version actions print before calling exit().
        if message:
            self._captured.append(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        text = "".join(self._captured) + (message or "")
        self._captured.clear()
        raise ArgumentParsingError(
            text,
            usage=self.format_usage(),
            exit_status=status,
            is_help=status == 0,
        )

    def error(self, message: str) -> NoReturn:
        raise ArgumentParsingError(
            f"{self.prog}: error: {message}",
            usage=self.format_usage(),
            exit_status=2,
            hint=f"Run '{self.prog} --help' for usage.",
        )


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

class ArgumentParserAdapter:
    """Top-level grammar that grows one subcommand at a time.

    Parameters
    ----------
    prog:
        Program name shown in usage and help text.
    description:
        About text shown at the top of the help.
    author:
        Author line shown at the bottom of the help.
    version:
        When given, a ``-V/--version`` flag reports it.
    """

    def __init__(
        self,
        prog: str,
        description: str,
        *,
        author: str | None = None,
        version: str | None = None,
    ) -> None:
        self._parser = _RaisingArgumentParser(
            prog=prog,
            description=description,
            epilog=f"Author: {author}" if author else None,
        )
        if version is not None:
            self._parser.add_argument(
                "-V",
                "--version",
                action="version",
                version=f"%(prog)s {version}",
            )
        self._subparsers = self._parser.add_subparsers(
            dest=_COMMAND_DEST,
            title="commands",
            metavar="<command>",
        )

    @property
    def prog(self) -> str:
        return self._parser.prog

    @property
    def subcommand_names(self) -> tuple[str, ...]:
        """Names attached so far, in attachment order."""
        return tuple(self._subparsers.choices)

    def add_subcommand(
        self,
        name: str,
        fragment: argparse.ArgumentParser,
        *,
        summary: str = "",
    ) -> None:
        """Attach *fragment* as the subcommand *name*.

        Raises
        ------
        DuplicateCommandError
            If *name* is already part of the grammar.
        InvalidCommandError
            If *fragment* declares its own help flag or writes to the
            dest reserved for the selected subcommand name.
        """
        if name in self._subparsers.choices:
            raise DuplicateCommandError(f"Subcommand '{name}' is already defined.")
        _validate_fragment(name, fragment)

        self._subparsers.add_parser(
            name,
            parents=[fragment],
            help=summary or None,
            description=fragment.description or summary or None,
        )
        logger.debug("Attached subcommand %r to %s grammar", name, self.prog)

    def parse(self, args: Sequence[str]) -> ParsedArguments:
        """Parse *args* (program name already stripped).

        The sequence is copied, so the caller may parse the same
        arguments again.

        Raises
        ------
        ArgumentParsingError
            On any mismatch, and on explicit help or version requests.
        """
        namespace = self._parser.parse_args(list(args))
        values = vars(namespace)
        command = values.pop(_COMMAND_DEST, None)
        return ParsedArguments(command=command, options=argparse.Namespace(**values))

    def format_help(self) -> str:
        return self._parser.format_help()


def _validate_fragment(name: str, fragment: argparse.ArgumentParser) -> None:
    """Reject fragments that clash with the subparser's help flag or dest."""
    if not isinstance(fragment, argparse.ArgumentParser):
        raise InvalidCommandError(
            f"Command '{name}' must build an argparse.ArgumentParser grammar, "
            f"got {type(fragment).__name__}.",
        )
    for action in fragment._actions:
        if _HELP_FLAGS.intersection(action.option_strings):
            raise InvalidCommandError(
                f"Command '{name}' grammar must not define -h/--help.",
                hint="Create the fragment with argparse.ArgumentParser(add_help=False).",
            )
        if action.dest == _COMMAND_DEST:
            raise InvalidCommandError(
                f"Command '{name}' grammar must not use the reserved dest '{_COMMAND_DEST}'.",
            )
    if _COMMAND_DEST in fragment._defaults:
        raise InvalidCommandError(
            f"Command '{name}' grammar must not set a default for '{_COMMAND_DEST}'.",
        )
