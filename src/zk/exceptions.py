"""Custom exception hierarchy for zk-cli.

All exceptions that cross layer boundaries must inherit from
:class:`ZkError`.  Raw third-party exceptions (e.g. from PyYAML or the
operating system) must NEVER propagate beyond the layer that triggered
them — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
ZkError
├── CommandExecutionError
│   ├── ArgumentParsingError
│   ├── UnknownCommandError
│   ├── CommandFailedError
│   └── OutputWriteError
├── CommandRegistrationError
│   ├── InvalidCommandError
│   └── DuplicateCommandError
└── ConfigError
    ├── ConfigNotFoundError
    ├── YamlBadFormatError
    ├── YamlIsMultiDocumentError
    └── FieldMissingError
"""

from __future__ import annotations


class ZkError(Exception):
    """Base exception for all zk-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command execution -----------------------------------------------------

class CommandExecutionError(ZkError):
    """Raised when :meth:`Application.run` cannot complete a dispatch.

    Commands signal their own run-time failures with a subclass of
    this exception.
    """


class ArgumentParsingError(CommandExecutionError):
    """Raised when the raw arguments do not match the command grammar.

    Explicit ``--help`` and ``--version`` requests are reported through
    this error too: they short-circuit execution exactly like a parse
    failure, but carry ``is_help=True`` and ``exit_status=0``.
    """

    def __init__(
        self,
        message: str,
        *,
        usage: str = "",
        exit_status: int = 2,
        is_help: bool = False,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: str = usage
        """Usage line of the (sub)parser that rejected the arguments."""
        self.exit_status: int = exit_status
        """Exit status argparse itself would have used."""
        self.is_help: bool = is_help
        """``True`` when the user asked for help or version text."""


class UnknownCommandError(CommandExecutionError):
    """Raised when no subcommand was given, or none matches the registry."""


class CommandFailedError(CommandExecutionError):
    """Raised by a command whose own work could not be completed."""


class OutputWriteError(CommandExecutionError):
    """Raised when writing to the environment's output sink fails."""


# --- Command registration --------------------------------------------------

class CommandRegistrationError(ZkError):
    """Raised when a command cannot be added to the application."""


class InvalidCommandError(CommandRegistrationError):
    """Raised when a command class does not satisfy the command contract."""


class DuplicateCommandError(CommandRegistrationError):
    """Raised when a command name is already registered."""


# --- Configuration ---------------------------------------------------------

class ConfigError(ZkError):
    """Base class for configuration loading and parsing failures."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is missing or unreadable."""


class YamlBadFormatError(ConfigError):
    """Raised when the configuration text is not valid YAML."""


class YamlIsMultiDocumentError(ConfigError):
    """Raised when the configuration text holds more than one document."""


class FieldMissingError(ConfigError):
    """Raised when a required field is absent or has the wrong type."""

    def __init__(self, field: str, *, hint: str | None = None) -> None:
        super().__init__(f"required field '{field}' is missing", hint=hint)
        self.field: str = field
        """Name of the offending configuration field."""
