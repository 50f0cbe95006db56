import pytest

from wayangwave.colors import (
    BLUE,
    GREEN,
    NORMAL,
    RED,
    print_blue,
    print_green,
    print_red,
)


def test_print_red(capsys):
    print_red("R")
    assert capsys.readouterr().out == RED + "R" + NORMAL


def test_print_green(capsys):
    print_green("G")
    assert capsys.readouterr().out == GREEN + "G" + NORMAL


def test_print_blue(capsys):
    print_blue("B")
    assert capsys.readouterr().out == BLUE + "B" + NORMAL


def test_output_uses_ansi_escape_codes(capsys):
    print_red("R")
    print_green("G")
    print_blue("B")
    assert capsys.readouterr().out == (
        "\x1B[31mR\x1B[0m" "\x1B[32mG\x1B[0m" "\x1B[34mB\x1B[0m"
    )


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        print_red(bad)