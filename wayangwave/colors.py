"""ANSI colour codes and single-character colour printers."""

NORMAL = "\x1B[0m"
BLACK = "\x1B[30m"
RED = "\x1B[31m"
GREEN = "\x1B[32m"
YELLOW = "\x1B[33m"
BLUE = "\x1B[34m"
MAGENTA = "\x1B[35m"
CYAN = "\x1B[36m"
WHITE = "\x1B[37m"


def _print_coloured(colour: str, c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    print(f"{colour}{c}{NORMAL}", end="")


def print_red(c: str) -> None:
    """Print one character in red, then reset the colour."""
    _print_coloured(RED, c)


def print_green(c: str) -> None:
    """Print one character in green, then reset the colour."""
    _print_coloured(GREEN, c)


def print_blue(c: str) -> None:
    """Print one character in blue, then reset the colour."""
    _print_coloured(BLUE, c)