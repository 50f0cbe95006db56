"""Word machine: splits a character tape into blank-separated words."""

from __future__ import annotations

from typing import Iterator, TextIO

from wayangwave.linereader import EOF, MARK, NEWLINE, CharTape

NMAX = 500
BLANK = " "

_WORD_END = (BLANK, MARK, NEWLINE, EOF)


class WordMachine:
    """Acquires words separated by blanks, ending at ';', a newline or end of input."""

    def __init__(self, tape: CharTape):
        self.tape = tape
        self.end = False
        self.word = ""
        self.input = ""

    def _ignore_blanks(self) -> None:
        while self.tape.cc == BLANK:
            self.tape.advance()

    def _at_end(self) -> bool:
        return self.tape.cc in (MARK, NEWLINE, EOF)

    def _copy(self) -> str:
        chars = []
        while self.tape.cc not in _WORD_END:
            if len(chars) < NMAX:
                chars.append(self.tape.cc)
            self.tape.advance()
        return "".join(chars)

    def start(self) -> str:
        """Read the first word."""
        self._ignore_blanks()
        self.end = self._at_end()
        if not self.end:
            self.word = self._copy()
        return self.word

    def start_input(self) -> str:
        """Read the first word into ``input``."""
        self._ignore_blanks()
        self.end = self._at_end()
        if not self.end:
            self.input = self._copy()
        return self.input

    def advance(self) -> str:
        """Read the next word, setting ``end`` when none is left."""
        self._ignore_blanks()
        if self._at_end():
            self.end = True
        else:
            self.word = self._copy()
            self._ignore_blanks()
        return self.word

    def __iter__(self) -> Iterator[str]:
        self.start()
        while not self.end:
            yield self.word
            self.advance()


def read_words(stream: TextIO) -> list[str]:
    """Return the words of a stream up to the first ';' or end of line."""
    return list(WordMachine(CharTape(stream)))