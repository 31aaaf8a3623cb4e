"""Prepend/append and parenthesis removal over argument lists.

Each operation has a direct form that works on argument-list text, and a
generator that writes a preprocessor header doing the same job for up to
``MAX_ARGS`` arguments.
"""

from __future__ import annotations

from macrotoys.arguments import MAX_ARGS, args_count, split_args
from macrotoys.transforms import remove_parenthesis

_PAA = "INTERNAL_MPT_PAA"
_RPIL = "INTERNAL_MPT_RPIL"
_PAA_RULE = "INTERNAL_MPT_PREPEND_APPEND_ARGS"
_RPIL_RULE = "MPT_REMOVE_PARENTHESIS_IN_LIST"

_ROW = 10


def prepend_append_args(prepend: str, append: str, text: str) -> str:
    """Surround every argument of *text* with *prepend* and *append*.

    The results are joined with ``", "``. An empty argument list gives an
    empty string. Raises ArgumentLimitError past ``MAX_ARGS`` arguments.
    """
    args_count(text)
    wrapped = (
        " ".join(piece for piece in (prepend.strip(), arg, append.strip()) if piece)
        for arg in split_args(text)
    )
    return ", ".join(wrapped)


def remove_parenthesis_in_list(text: str) -> str:
    """Remove one pair of leading parentheses from each argument of *text*.

    Raises ArgumentLimitError past ``MAX_ARGS`` arguments.
    """
    args_count(text)
    return ", ".join(remove_parenthesis(arg) for arg in split_args(text))


def _macro(head: str, body: list[str]) -> str:
    """Join a macro head and body lines with line continuations."""
    return " \\\n".join([head, *body])


def _compose(prefix: str, *suffixes: str) -> str:
    return "\n".join(f"#define {prefix}_COMPOSE{s}( A, B ) A B" for s in suffixes)


def _delayed_compose(prefix: str, suffix: str) -> str:
    return "\n".join(
        [
            f"#define {prefix}_DELAY{suffix}( ... ) __VA_ARGS__",
            f"#define {prefix}_DELAYED_COMPOSE_INNER{suffix}(macro, args) "
            f"{prefix}_COMPOSE{suffix}( macro, args )",
            f"#define {prefix}_DELAYED_COMPOSE{suffix}(macro, args) "
            f"{prefix}_DELAYED_COMPOSE_INNER{suffix}( macro, {prefix}_DELAY{suffix}(args) )",
        ]
    )


def _multi_concat(prefix: str, suffix: str) -> str:
    return "\n".join(
        [
            f"#define {prefix}_MULTI_CONCAT{suffix}( A, ... ) A ## __VA_ARGS__",
            f"#define {prefix}_DELAYED_MULTI_CONCAT_INNER{suffix}(A, ...) "
            f"{prefix}_MULTI_CONCAT{suffix}(A, __VA_ARGS__)",
            f"#define {prefix}_DELAYED_MULTI_CONCAT{suffix}(A, ...) "
            f"{prefix}_DELAYED_MULTI_CONCAT_INNER{suffix}(A, __VA_ARGS__)",
        ]
    )


def _select(prefix: str) -> str:
    return "\n".join(
        [
            f"#define {prefix}_CONCAT( A, B ) A ## B",
            f"#define {prefix}_SELECT( NAME, NUM ) {prefix}_CONCAT( NAME ## _, NUM )",
        ]
    )


def _section(title: str) -> str:
    rule = "//" + "-" * 34
    return f"{rule}\n//{title}\n{rule}"


def _rows(values: list[str], trailing_comma: bool) -> list[str]:
    chunks = [values[start : start + _ROW] for start in range(0, len(values), _ROW)]
    rows = [", ".join(chunk) + "," for chunk in chunks]
    if not trailing_comma:
        rows[-1] = rows[-1][:-1]
    return rows


def _count_table(prefix: str, suffix: str) -> str:
    """The comma expansion, parenthesis guard and count picker for *prefix*."""
    commas = ["," * _ROW] * (MAX_ARGS // _ROW) + ["," * (MAX_ARGS % _ROW)]
    expand = _macro(
        f"#define {prefix}_EXPAND_{prefix}_PROTECT_FIRST_ARG_PARENS{suffix}()",
        ["                                " + line for line in commas],
    )
    protect = f"#define {prefix}_PROTECT_FIRST_ARG_PARENS{suffix}(...) FIRST_ARG"
    names = [f"_{n}" for n in range(MAX_ARGS + 1)] + ["COUNT", "..."]
    name_rows = _rows(names, trailing_comma=False)
    head = f"#define {prefix}_GET_COUNT{suffix}({name_rows[0]}"
    get_count = _macro(
        head, ["                                " + row for row in name_rows[1:]]
    )
    get_count = get_count[: -len("...,")] if get_count.endswith("...,") else get_count
    get_count += ") COUNT"
    return "\n\n".join([expand, protect, get_count])


def _counting_macro(
    name: str,
    prefix: str,
    outer: str,
    inner: str,
    concat: str,
    table: str,
    values: list[str],
    trailing_comma: bool,
) -> str:
    """A macro that picks one of *values* by the number of its arguments."""
    body = [
        f"    {prefix}_DELAYED_COMPOSE{outer}",
        "    (",
        f"        {prefix}_GET_COUNT{table},",
        "        (",
        f"            {prefix}_COMPOSE{inner}",
        "            (",
        f"                {prefix}_DELAYED_MULTI_CONCAT{concat}",
        "                (",
        f"                    {prefix}_EXPAND_,",
        f"                    {prefix}_PROTECT_FIRST_ARG_PARENS{table} __VA_ARGS__",
        "                ),",
        "                ()",
        "            ),",
        *("            " + row for row in _rows(values, trailing_comma)),
        "        )",
        "    )",
    ]
    return _macro(f"#define {name}( ... )", body)


def _count_values() -> list[str]:
    return ["0", *(str(n) for n in range(MAX_ARGS, 0, -1))]


def _empty_values() -> list[str]:
    return ["EMPTY", *(["NOT_EMPTY"] * MAX_ARGS)]


def _params(name: str, count: int) -> str:
    return ", ".join(f"{name}{n}" for n in range(1, count + 1))


def _header(guard: str, blocks: list[str]) -> str:
    return "\n".join(
        ["", f"#ifndef {guard}", f"#define {guard}", "", "\n\n".join(blocks), "", "#endif", ""]
    )


def _prepend_append_rule(count: int) -> str:
    if count == 0:
        return f"#define {_PAA_RULE}_0( pre, app )"
    if count == 1:
        return f"#define {_PAA_RULE}_1( pre, app, _1 ) \\\npre _1 app"
    return (
        f"#define {_PAA_RULE}_{count}( pre, app, {_params('_', count)} ) \\\n"
        f"{_PAA_RULE}_{count - 1}(pre, app, {_params('_', count - 1)}), "
        f"pre _{count} app"
    )


def generate_prepend_append_args() -> str:
    """Return a header defining ``MPT_PREPEND_APPEND_ARGS(prepend, append, ...)``."""
    main_macro = _macro(
        "#define MPT_PREPEND_APPEND_ARGS( prepend, append, ... )",
        [
            f"    {_PAA}_DELAYED_COMPOSE",
            "    (",
            f"        {_PAA}_COMPOSE2",
            "        (",
            f"            {_PAA}_COMPOSE3,",
            "            (",
            f"                {_PAA}_DELAYED_SELECT,",
            f"                ( {_PAA_RULE}, {_PAA}_ARGS_COUNT( __VA_ARGS__ ) )",
            "            )",
            "        ),",
            "        (",
            "            prepend,",
            "            append",
            f"            {_PAA}_COMPOSE4",
            "            (",
            f"                {_PAA}_DELAYED_CONCAT2",
            "                (",
            f"                    {_PAA}_PREPEND_COMMA_, {_PAA}_ARE_ARGS_EMPTY( __VA_ARGS__ )",
            "                ),",
            "                (__VA_ARGS__)",
            "            ) __VA_ARGS__",
            "        )",
            "    )",
        ],
    )
    blocks = [
        _compose(_PAA, "", "2", "3", "4"),
        _delayed_compose(_PAA, ""),
        "\n".join(
            [
                _select(_PAA),
                f"#define {_PAA}_DELAYED_SELECT_INNER( NAME, NUM ) {_PAA}_SELECT( NAME, NUM )",
                f"#define {_PAA}_DELAYED_SELECT( NAME, NUM ) "
                f"{_PAA}_DELAYED_SELECT_INNER( NAME, NUM )",
            ]
        ),
        "\n".join(
            [
                f"#define {_PAA}_CONCAT2( A, B ) A ## B",
                f"#define {_PAA}_DELAYED_CONCAT2_INNER(A, B) {_PAA}_CONCAT2(A, B)",
                f"#define {_PAA}_DELAYED_CONCAT2(A, B) {_PAA}_DELAYED_CONCAT2_INNER(A, B)",
            ]
        ),
        _section("Get Counts"),
        _multi_concat(_PAA, ""),
        _compose(_PAA, "5", "6"),
        _delayed_compose(_PAA, "5"),
        _count_table(_PAA, ""),
        _counting_macro(
            f"{_PAA}_ARGS_COUNT", _PAA, "5", "6", "", "", _count_values(), False
        ),
        _section("Are Args Empty"),
        _compose(_PAA, "7", "8"),
        _delayed_compose(_PAA, "7"),
        _multi_concat(_PAA, "2"),
        _count_table(_PAA, "2"),
        _counting_macro(
            f"{_PAA}_ARE_ARGS_EMPTY", _PAA, "7", "8", "2", "2", _empty_values(), True
        ),
        "\n".join(
            [
                f"#define {_PAA}_PREPEND_COMMA_EMPTY(...)",
                f"#define {_PAA}_PREPEND_COMMA_NOT_EMPTY(...) ,",
            ]
        ),
        main_macro,
        *(_prepend_append_rule(count) for count in range(MAX_ARGS + 1)),
    ]
    return _header("MPT_PREPEND_APPEND_ARGS_H", blocks)


def _remove_parenthesis_rule(count: int) -> str:
    if count == 0:
        return f"#define {_RPIL_RULE}_0()"
    calls = ", ".join(f"MPT_REMOVE_PARENTHESIS(arg{n})" for n in range(1, count + 1))
    return f"#define {_RPIL_RULE}_{count}({_params('arg', count)}) {calls}"


def generate_remove_parenthesis() -> str:
    """Return a header defining ``MPT_REMOVE_PARENTHESIS`` and its list form."""
    remover = f"{_RPIL}_REMOVE_PARENTHESIS"
    list_macro = _macro(
        f"#define {_RPIL_RULE}( ... )",
        [
            f"    {_RPIL}_DELAYED_COMPOSE",
            "    (",
            f"        {_RPIL}_COMPOSE2",
            "        (",
            f"            {_RPIL}_SELECT,",
            f"            ( {_RPIL_RULE}, {_RPIL}_ARGS_COUNT( __VA_ARGS__ ) )",
            "        ),",
            "        (__VA_ARGS__)",
            "    )",
        ],
    )
    blocks = [
        _multi_concat(_RPIL, ""),
        _compose(_RPIL, "", "2"),
        _delayed_compose(_RPIL, ""),
        _select(_RPIL),
        _section("Get Counts"),
        _multi_concat(_RPIL, "2"),
        _compose(_RPIL, "3", "4"),
        _delayed_compose(_RPIL, "3"),
        _count_table(_RPIL, ""),
        _counting_macro(
            f"{_RPIL}_ARGS_COUNT", _RPIL, "3", "4", "2", "", _count_values(), False
        ),
        f"#define {remover}( ... ) {remover} __VA_ARGS__",
        f"#define {_RPIL}_CANCEL_{remover}",
        _macro(
            "#define MPT_REMOVE_PARENTHESIS( ... )",
            [f"    {_RPIL}_DELAYED_MULTI_CONCAT({_RPIL}_CANCEL_, {remover} __VA_ARGS__)"],
        ),
        list_macro,
        "\n".join(_remove_parenthesis_rule(count) for count in range(MAX_ARGS + 1)),
    ]
    return _header("MPT_REMOVE_PARAENTHESIS_H", blocks)