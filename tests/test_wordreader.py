import io

from wayangwave.linereader import CharTape
from wayangwave.wordreader import NMAX, WordMachine, read_words


def test_read_words_splits_on_blanks():
    assert read_words(io.StringIO("a bb   ccc;")) == ["a", "bb", "ccc"]


def test_read_words_stops_at_mark():
    assert read_words(io.StringIO("one two;three")) == ["one", "two"]


def test_read_words_empty():
    assert read_words(io.StringIO(";")) == []


def test_read_words_stops_at_end_of_input():
    assert read_words(io.StringIO("alpha beta")) == ["alpha", "beta"]


def test_read_words_stops_at_newline():
    assert read_words(io.StringIO("alpha\nbeta")) == ["alpha"]


def test_long_word_is_truncated():
    words = read_words(io.StringIO("y" * (NMAX + 20) + ";"))
    assert words == ["y" * NMAX]


def test_start_input():
    m = WordMachine(CharTape(io.StringIO("  cmd rest;")))
    assert m.start_input() == "cmd"
    assert m.end is False


def test_start_and_advance():
    m = WordMachine(CharTape(io.StringIO("x y;")))
    assert m.start() == "x"
    assert m.advance() == "y"
    m.advance()
    assert m.end is True


def test_round_trip_join():
    words = ["satu", "dua", "tiga"]
    assert read_words(io.StringIO(" ".join(words) + ";")) == words