"""Line-oriented output shared by the cache components."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


class Log:
    """Writes each message as one line to the console and, when open, to a file.

    ``console`` is the stream for console output. ``None`` means whatever
    ``sys.stdout`` is at the time of writing.
    """

    def __init__(self, console: TextIO | None = None) -> None:
        self._console = console
        self._file: TextIO | None = None
        self.path: Path | None = None

    @property
    def is_open(self) -> bool:
        """True while an output file is attached."""
        return self._file is not None

    def open_file(self, path: str | Path) -> bool:
        """Attach a new output file, closing any previous one.

        On failure a message goes to standard error, no file stays attached,
        and console output carries on. Returns whether the file was opened.
        """
        self.close()
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError:
            print(f"Failed to open file: {path}", file=sys.stderr)
            return False
        self.path = Path(path)
        return True

    def emit(self, message: str) -> None:
        """Write ``message`` followed by a newline to every open destination."""
        console = self._console if self._console is not None else sys.stdout
        console.write(message + "\n")
        if self._file is not None:
            self._file.write(message + "\n")

    def close(self) -> None:
        """Detach and close the output file, if any."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self.path = None

    def __enter__(self) -> Log:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()