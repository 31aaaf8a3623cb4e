"""Splitting, counting and emptiness checks for macro-style argument lists.

An argument list is text such as ``a, (b, c), "d,e"``. Arguments are split
at top-level commas only. Commas inside parentheses or inside string and
character literals do not split. At most ``MAX_ARGS`` arguments can be
counted.
"""

from __future__ import annotations

MAX_ARGS = 99

_QUOTES = {'"', "'"}


class ArgumentLimitError(ValueError):
    """Raised when an argument list holds more arguments than can be counted."""

    def __init__(self, count: int, limit: int = MAX_ARGS) -> None:
        super().__init__(f"{count} arguments given, at most {limit} are supported")
        self.count = count
        self.limit = limit


def _top_level_pieces(text: str) -> list[str]:
    """Cut *text* at top-level commas without stripping the pieces."""
    pieces: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False

    for char in text:
        current.append(char)
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in _QUOTES:
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise ValueError(f"unbalanced ')' in argument list: {text!r}")
        elif char == "," and depth == 0:
            current.pop()
            pieces.append("".join(current))
            current = []

    if quote is not None:
        raise ValueError(f"unterminated literal in argument list: {text!r}")
    if depth != 0:
        raise ValueError(f"unbalanced '(' in argument list: {text!r}")

    pieces.append("".join(current))
    return pieces


def split_args(text: str) -> list[str]:
    """Split *text* into its arguments, each with surrounding whitespace removed.

    Text holding only whitespace has no arguments. Otherwise each top-level
    comma separates two arguments, which may themselves be empty.
    """
    if not text.strip():
        return []
    return [piece.strip() for piece in _top_level_pieces(text)]


def args_count(text: str) -> int:
    """Return the number of arguments in *text*.

    Raises ArgumentLimitError when there are more than ``MAX_ARGS``.
    """
    count = len(split_args(text))
    if count > MAX_ARGS:
        raise ArgumentLimitError(count)
    return count


def are_args_empty(text: str) -> bool:
    """Return True when *text* holds no arguments at all."""
    return not split_args(text)