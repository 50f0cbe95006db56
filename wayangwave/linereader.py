"""Character tape and line machine for reading user input and files."""

from __future__ import annotations

import sys
from typing import TextIO

MARK = ";"
MARK2 = "\0"
NEWLINE = "\n"
BLANK = " "
EOF = ""
NMAKS = 100


class CharTape:
    """A stream read one character at a time; ``cc`` is the current one."""

    def __init__(self, stream: TextIO):
        self._stream: TextIO | None = stream
        self._owned = False
        self.cc = EOF
        self.advance()

    @classmethod
    def open(cls, filename) -> "CharTape":
        """Open a file as a tape, positioned on its first character."""
        try:
            stream = open(filename, "r", encoding="utf-8")
        except OSError as exc:
            raise FileNotFoundError(f"File tidak ditemukan: {filename}") from exc
        tape = cls.__new__(cls)
        tape._stream = stream
        tape._owned = True
        tape.cc = EOF
        tape.advance()
        return tape

    @property
    def eof(self) -> bool:
        return self.cc == EOF

    def advance(self) -> str:
        """Move to the next character and return it ('' at end of input)."""
        if self._stream is None:
            self.cc = EOF
            return self.cc
        self.cc = self._stream.read(1)
        if self.cc == EOF and self._owned:
            self.close()
        return self.cc

    def close(self) -> None:
        if self._stream is not None and self._owned:
            self._stream.close()
        self._stream = None

    def __enter__(self) -> "CharTape":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class LineMachine:
    """Acquires lines, commands, words and records from a character tape."""

    def __init__(self, tape: CharTape):
        self.tape = tape
        self.end = False
        self.line = ""
        self.input = ""
        self.command = ""

    def _skip(self, *chars: str) -> None:
        while self.tape.cc != EOF and self.tape.cc in chars:
            self.tape.advance()

    def _copy_until(self, *stops: str) -> str:
        chars = []
        while self.tape.cc != EOF and self.tape.cc not in stops:
            if len(chars) < NMAKS:
                chars.append(self.tape.cc)
            self.tape.advance()
        return "".join(chars)

    def start_input(self) -> str:
        """Read one line of input, skipping leading newlines."""
        self._skip(NEWLINE)
        self.end = self.tape.cc == MARK
        if not self.end:
            self.input = self._copy_until(MARK, NEWLINE)
        return self.input

    def start_command(self) -> str:
        """Read the first space-separated token of a command."""
        self._skip(NEWLINE)
        self.end = self.tape.cc == MARK
        if not self.end:
            self.command = self._copy_until(BLANK, MARK)
        return self.command

    def advance_command(self) -> str:
        """Read the next space-separated token of a command."""
        self._skip(BLANK)
        self.end = self.tape.cc == MARK
        if not self.end:
            self.command = self._copy_until(BLANK, MARK)
        return self.command

    def _line(self) -> str:
        self.end = self.tape.cc in (MARK2, EOF)
        if not self.end:
            self.line = self._copy_until(MARK, NEWLINE)
        return self.line

    def advance_line(self) -> str:
        """Read the next line, skipping newlines and leading blanks."""
        self._skip(NEWLINE)
        self._skip(BLANK)
        return self._line()

    def advance_word(self) -> str:
        """Read the next word, ending at a blank or ';'."""
        self._skip(BLANK)
        self._skip(NEWLINE)
        self.end = self.tape.cc in (BLANK, EOF)
        if not self.end:
            self.line = self._copy_until(BLANK, MARK)
        return self.line

    def advance_record(self) -> str:
        """Read the next ';'-terminated record on the current line."""
        self._skip(BLANK)
        self._skip(NEWLINE)
        self._skip(MARK)
        self.end = self.tape.cc in (MARK, NEWLINE, EOF)
        if not self.end:
            self.line = self._copy_until(MARK, NEWLINE)
        return self.line


def start_file(filename) -> LineMachine:
    """Open a file and read its first line into a new machine."""
    machine = LineMachine(CharTape.open(filename))
    machine._skip(NEWLINE)
    machine._line()
    return machine


def read_input(stream: TextIO | None = None) -> str:
    """Read one line of input from a stream (standard input by default)."""
    machine = LineMachine(CharTape(sys.stdin if stream is None else stream))
    return machine.start_input()


def directory_path(name: str) -> str:
    """Return the path of a file inside the data directory."""
    return "Data/" + name