"""zk-cli — a command-line note-taking tool for the Zettelkasten method.

Built around a pluggable command registry: commands register with an
:class:`~zk.core.application.Application`, which parses the process
arguments and dispatches to exactly one of them.
"""

from zk.version import __version__

__all__: list[str] = ["__version__"]
