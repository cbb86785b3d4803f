"""Execution environment handed to every command.

Wraps the single output sink of one application run so that commands
never depend on a concrete stream type.
"""

from __future__ import annotations

from zk.core.protocols import OutputSink
from zk.exceptions import OutputWriteError


class Environment:
    """The I/O surface a command writes through.

    Parameters
    ----------
    output:
        Any object satisfying :class:`~zk.core.protocols.OutputSink`.
        The environment does not close it; the caller keeps ownership.
    """

    def __init__(self, output: OutputSink) -> None:
        self._output: OutputSink = output

    @property
    def output(self) -> OutputSink:
        """The wrapped sink, for libraries that need a file-like target."""
        return self._output

    def write(self, text: str) -> None:
        """Write *text* verbatim to the sink.

        Raises
        ------
        OutputWriteError
            When the sink rejects the write (closed stream, broken
            pipe, full disk…).
        """
        try:
            self._output.write(text)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"Failed to write output: {exc}") from exc

    def writeln(self, text: str = "") -> None:
        """Write *text* followed by a newline."""
        self.write(f"{text}\n")

    def flush(self) -> None:
        """Flush the sink when it supports flushing."""
        flush = getattr(self._output, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"Failed to flush output: {exc}") from exc
