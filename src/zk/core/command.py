"""Convenience base class for commands.

Subclassing :class:`BaseCommand` is optional — the registry only
relies on the :class:`~zk.core.protocols.Command` protocol — but it
removes the boilerplate of building an empty grammar fragment.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod

from zk.core.environment import Environment


class BaseCommand(ABC):
    """Stateless command skeleton.

    Subclasses set :attr:`name` (and usually :attr:`summary`), declare
    their options in :meth:`add_arguments` and implement :meth:`run`.
    """

    name: str = ""
    summary: str = ""

    def build_arg_grammar(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.summary or None,
            add_help=False,
        )
        self.add_arguments(parser)
        return parser

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Declare this command's options on *parser*.  No-op by default."""

    @abstractmethod
    def run(self, env: Environment, options: argparse.Namespace) -> None:
        """Perform the command."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
