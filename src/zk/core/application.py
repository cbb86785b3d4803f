"""Application — the command registry and dispatcher.

The application owns the raw argument vector, the
:class:`~zk.core.environment.Environment` and the top-level grammar.
Commands are registered one class at a time; :meth:`Application.run`
parses the stored arguments and invokes exactly one command.

Guarantees
----------
* The set of subcommands known to the grammar is always exactly the
  set of registered command names.
* Registration order is preserved.
* Dispatch is sequential: one ``run()`` executes at most one command.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from zk.core.arg_parser import ArgumentParserAdapter
from zk.core.environment import Environment
from zk.core.protocols import Command, OutputSink
from zk.exceptions import DuplicateCommandError, InvalidCommandError, UnknownCommandError
from zk.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "zk_cli"
ABOUT: str = "A CLI note-taking application for Zettelkasten methodology."
AUTHOR: str = "Stepan Repin <stnrepin@gmail.com>"

NO_COMMAND_MESSAGE: str = f"{PROG} command is not specified"
UNKNOWN_COMMAND_MESSAGE: str = "command is unknown"


class Application:
    """Registry of commands plus the dispatcher that runs one of them.

    Parameters
    ----------
    args:
        The raw process arguments, program name first.  A copy is
        stored, so later changes to the caller's list have no effect.
    output:
        The sink wrapped by the application's environment.
    """

    def __init__(
        self,
        args: Sequence[str],
        output: OutputSink,
        *,
        prog: str = PROG,
        about: str = ABOUT,
        author: str | None = AUTHOR,
        version: str | None = __version__,
    ) -> None:
        self._args: list[str] = list(args)
        self._env = Environment(output)
        self._commands: dict[str, Command] = {}
        self._parser = ArgumentParserAdapter(
            prog,
            about,
            author=author,
            version=version,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def args(self) -> list[str]:
        return list(self._args)

    @property
    def environment(self) -> Environment:
        return self._env

    @property
    def commands(self) -> tuple[Command, ...]:
        """Registered commands in registration order."""
        return tuple(self._commands.values())

    @property
    def parser(self) -> ArgumentParserAdapter:
        return self._parser

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_command(self, command_cls: type[Command]) -> Command:
        """Instantiate *command_cls* and register it under its name.

        The registry and the grammar are updated together: when any
        step fails, neither of them changes.

        Returns
        -------
        Command
            The registered instance.

        Raises
        ------
        InvalidCommandError
            If the command has no usable name or grammar.
        DuplicateCommandError
            If a command with the same name is already registered.
        """
        command = command_cls()
        name = getattr(command, "name", None)
        if not isinstance(name, str) or not name or name.startswith("-") or any(
            ch.isspace() for ch in name
        ):
            raise InvalidCommandError(
                f"{command_cls.__name__} has an invalid command name: {name!r}",
                hint="Command names must be non-empty, without whitespace "
                "and must not start with '-'.",
            )
        if name in self._commands:
            existing = type(self._commands[name]).__name__
            raise DuplicateCommandError(
                f"Command '{name}' is already registered by {existing}.",
            )

        fragment = command.build_arg_grammar()
        self._parser.add_subcommand(
            name,
            fragment,
            summary=getattr(command, "summary", ""),
        )
        self._commands[name] = command
        logger.debug("Registered command %r (%s)", name, command_cls.__name__)
        return command

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Parse the stored arguments and run the selected command.

        Raises
        ------
        ArgumentParsingError
            If the arguments do not match the grammar (or ask for help).
        UnknownCommandError
            If no subcommand was given, or the selected one is not in
            the registry.
        CommandExecutionError
            Whatever the selected command raised, unmodified.
        """
        parsed = self._parser.parse(self._args[1:])

        if parsed.command is None:
            raise UnknownCommandError(
                NO_COMMAND_MESSAGE,
                hint=f"Run '{self._parser.prog} --help' to list available commands.",
            )

        command = self._commands.get(parsed.command)
        if command is None:
            raise UnknownCommandError(UNKNOWN_COMMAND_MESSAGE)

        logger.debug("Dispatching to %r with %s", parsed.command, parsed.options)
        command.run(self._env, parsed.options)
