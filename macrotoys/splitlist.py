"""Joining the arguments of a list with a delimiter.

``split_list`` works directly on argument-list text. ``generate_split_list``
writes a preprocessor header that does the same for up to ``MAX_ARGS``
arguments.
"""

from __future__ import annotations

from macrotoys.arguments import MAX_ARGS, args_count, split_args
from macrotoys.generators import (
    _compose,
    _count_table,
    _count_values,
    _counting_macro,
    _delayed_compose,
    _header,
    _macro,
    _multi_concat,
    _params,
    _section,
    _select,
)

_SL = "INTERNAL_MPT_SL"
_SL_RULE = "INTERNAL_MPT_SPLIT_LIST"


def split_list(delimiter: str, text: str) -> str:
    """Join the arguments of *text* with *delimiter* between each pair.

    An empty argument list gives an empty string and a single argument is
    returned alone. Raises ArgumentLimitError past ``MAX_ARGS`` arguments.
    """
    args_count(text)
    token = delimiter.strip()
    separator = f" {token} " if token else " "
    return separator.join(split_args(text))


def _split_list_rule(count: int) -> str:
    if count == 0:
        return f"#define {_SL_RULE}_0( delimiter )"
    if count == 1:
        return f"#define {_SL_RULE}_1( delimiter, arg1 ) arg1"
    if count == 2:
        return f"#define {_SL_RULE}_2( delimiter, arg1, arg2 ) arg1 delimiter arg2"
    return (
        f"#define {_SL_RULE}_{count}( delimiter, {_params('arg', count)} ) \\\n"
        f"{_SL_RULE}_{count - 1}( delimiter, {_params('arg', count - 1)} ) "
        f"delimiter arg{count}"
    )


def generate_split_list() -> str:
    """Return a header defining ``MPT_SPLIT_LIST(delimiter, ...)``."""
    main_macro = _macro(
        "#define MPT_SPLIT_LIST( delimiter, ... )",
        [
            f"    {_SL}_DELAYED_COMPOSE",
            "    (",
            f"        {_SL}_COMPOSE2",
            "        (",
            f"            {_SL}_SELECT,",
            f"            ( {_SL_RULE}, {_SL}_ARGS_COUNT( __VA_ARGS__ ) )",
            "        ),",
            "        (delimiter, __VA_ARGS__)",
            "    )",
        ],
    )
    blocks = [
        "\n".join([_compose(_SL, "", "2"), _delayed_compose(_SL, "")]),
        _select(_SL),
        _section("Get Counts"),
        _multi_concat(_SL, ""),
        _compose(_SL, "3", "4"),
        _delayed_compose(_SL, "3"),
        _count_table(_SL, ""),
        _counting_macro(
            f"{_SL}_ARGS_COUNT", _SL, "3", "4", "", "", _count_values(), False
        ),
        main_macro,
        *(_split_list_rule(count) for count in range(MAX_ARGS + 1)),
    ]
    return _header("MPT_SPLIT_LIST_H", blocks)