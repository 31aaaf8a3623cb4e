"""Transformations on macro-style argument lists.

These work on the same text form as :mod:`macrotoys.arguments`. They pick
the last argument, strip one leading pair of parentheses, and expand text
only when an argument list is not empty.
"""

from __future__ import annotations

from macrotoys.arguments import args_count, are_args_empty, split_args

_QUOTES = {'"', "'"}


def get_last_arg(text: str) -> str:
    """Return the last argument of *text*, or an empty string if there is none.

    Raises ArgumentLimitError when *text* holds more arguments than can be
    counted.
    """
    if args_count(text) == 0:
        return ""
    return split_args(text)[-1]


def _closing_paren(text: str) -> int:
    """Return the index of the parenthesis that closes the one at index 0."""
    depth = 0
    quote: str | None = None
    escaped = False

    for index, char in enumerate(text):
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
            if depth == 0:
                return index

    if quote is not None:
        raise ValueError(f"unterminated literal: {text!r}")
    raise ValueError(f"unbalanced '(' in: {text!r}")


def remove_parenthesis(text: str) -> str:
    """Remove the parentheses around a leading parenthesised group.

    ``(a, b)`` becomes ``a, b`` and ``(a) b`` becomes ``a b``. Text that does
    not start with ``(`` is returned with surrounding whitespace removed and
    nothing else changed. Only the first group loses its parentheses.
    """
    stripped = text.strip()
    if not stripped.startswith("("):
        return stripped

    close = _closing_paren(stripped)
    inner = stripped[1:close].strip()
    rest = stripped[close + 1 :].strip()
    if inner and rest:
        return f"{inner} {rest}"
    return inner or rest


def args_opt(args: str, non_empty_expand: str) -> str:
    """Return *non_empty_expand* unwrapped when *args* holds any arguments.

    Both values may be wrapped in one pair of parentheses, which is removed
    first. When *args* is empty the result is an empty string.
    """
    if are_args_empty(remove_parenthesis(args)):
        return ""
    return remove_parenthesis(non_empty_expand)