"""Line reader that splits each input line into whitespace-separated fields."""

from __future__ import annotations

import re
import subprocess
import sys
from typing import IO, Iterator, List, Optional

MAXLEN = 1001
MAXFIELDS = 1000

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


class InputStruct:
    """Reads a text stream line by line, exposing the fields of the current line.

    After :meth:`get_line`, ``text`` holds the raw line, ``fields`` its fields,
    ``nf`` their number (-1 at end of input) and ``line`` the line count.
    Lines longer than ``MAXLEN - 2`` characters are returned in pieces.
    """

    def __init__(
        self,
        stream: IO[str],
        name: str = "stdin",
        process: Optional[subprocess.Popen] = None,
    ) -> None:
        self.stream = stream
        self.name = name
        self.process = process
        self.line = 0
        self.text = ""
        self.fields: List[str] = []
        self.nf = 0
        self._closed = False

    def get_line(self) -> Optional[List[str]]:
        """Read the next line and return its fields, or None at end of input."""
        self.nf = 0
        self.fields = []
        text = self.stream.readline(MAXLEN - 2)
        if not text:
            self.nf = -1
            self.text = ""
            return None
        self.line += 1
        self.text = text
        self.fields = [f for f in _WHITESPACE.split(text) if f][:MAXFIELDS]
        self.nf = len(self.fields)
        return self.fields

    def close(self) -> None:
        """Close the underlying file or wait for the piped command; stdin stays open."""
        if self._closed:
            return
        self._closed = True
        if self.stream is sys.stdin:
            return
        self.stream.close()
        if self.process is not None:
            self.process.wait()

    def __iter__(self) -> Iterator[List[str]]:
        while True:
            fields = self.get_line()
            if fields is None:
                return
            yield fields

    def __enter__(self) -> "InputStruct":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def new_inputstruct(filename: Optional[str] = None) -> InputStruct:
    """Open ``filename`` for field reading; None reads standard input."""
    if filename is None:
        return InputStruct(sys.stdin, "stdin")
    return InputStruct(open(filename, "r", encoding="utf-8"), filename)


def pipe_inputstruct(command: Optional[str] = None) -> InputStruct:
    """Run ``command`` through the shell and read its output; None reads standard input."""
    if command is None:
        return InputStruct(sys.stdin, "stdin")
    process = subprocess.Popen(
        command, shell=True, stdout=subprocess.PIPE, text=True, encoding="utf-8"
    )
    return InputStruct(process.stdout, command, process)