"""Core layer — command registry, dispatch and configuration parsing.

Rules
-----
* No ``print()`` calls.
* No access to process-global I/O (``sys.argv``, ``sys.stdout``):
  arguments and the output sink are injected.
* No imports from ``cli`` or ``infra``.
"""

from zk.core.application import Application
from zk.core.arg_parser import ArgumentParserAdapter, ParsedArguments
from zk.core.command import BaseCommand
from zk.core.config import Config
from zk.core.environment import Environment
from zk.core.protocols import Command, OutputSink

__all__: list[str] = [
    "Application",
    "ArgumentParserAdapter",
    "BaseCommand",
    "Command",
    "Config",
    "Environment",
    "OutputSink",
    "ParsedArguments",
]
