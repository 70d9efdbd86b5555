"""Line-oriented byte sink for console output."""

from __future__ import annotations

from typing import BinaryIO

NEWLINE = b"\n"


class OutputSink:
    """Writes one line per call to a binary stream.

    Store values are arbitrary bytes, so the sink never decodes them.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @property
    def is_terminal(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def write(self, data: bytes | None) -> None:
        """Write *data* followed by a newline.  ``None`` writes an empty line."""
        if data:
            self._stream.write(data)
        self._stream.write(NEWLINE)
        self._stream.flush()

    def write_text(self, text: str) -> None:
        self.write(text.encode("utf-8"))

    def write_prompt(self, prompt: str) -> None:
        """Write *prompt* without a trailing newline."""
        self._stream.write(prompt.encode("utf-8"))
        self._stream.flush()
