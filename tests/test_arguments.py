import pytest

from macrotoys.arguments import (
    MAX_ARGS,
    ArgumentLimitError,
    are_args_empty,
    args_count,
    split_args,
)


def test_split_simple_list():
    assert split_args("a, b, c") == ["a", "b", "c"]


def test_split_keeps_parenthesised_groups_whole():
    assert split_args("(a, b), c") == ["(a, b)", "c"]
    assert split_args("f(x, (y, z)), w") == ["f(x, (y, z))", "w"]


def test_split_ignores_commas_in_literals():
    assert split_args('"a,b", \',\'') == ['"a,b"', "','"]
    assert split_args(r'"a\",b", c') == [r'"a\",b"', "c"]


def test_split_empty_text_has_no_arguments():
    assert split_args("") == []
    assert split_args("   ") == []


def test_split_keeps_empty_arguments_between_commas():
    assert split_args(",") == ["", ""]
    assert split_args("a,,b") == ["a", "", "b"]


def test_split_then_join_round_trip():
    items = ["x", "(y, z)", "w(1, 2)", '"q,r"']
    assert split_args(", ".join(items)) == items


@pytest.mark.parametrize("text", ["(a, b", "a), b", '"abc, d'])
def test_split_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        split_args(text)


def test_count_matches_number_of_items():
    items = [f"a{i}" for i in range(17)]
    assert args_count(", ".join(items)) == len(items)


def test_count_of_empty_is_zero():
    assert args_count("") == 0


def test_count_accepts_maximum():
    text = ", ".join(f"x{i}" for i in range(MAX_ARGS))
    assert args_count(text) == MAX_ARGS


def test_count_rejects_beyond_maximum():
    text = ", ".join(f"x{i}" for i in range(MAX_ARGS + 1))
    with pytest.raises(ArgumentLimitError) as info:
        args_count(text)
    assert info.value.count == MAX_ARGS + 1
    assert info.value.limit == MAX_ARGS


def test_limit_error_is_value_error():
    with pytest.raises(ValueError):
        args_count(",".join(["a"] * (MAX_ARGS + 5)))


@pytest.mark.parametrize("text", ["", " ", "\t\n"])
def test_empty_args(text):
    assert are_args_empty(text) is True


@pytest.mark.parametrize("text", ["a", "()", "(a, b)", ",", "0"])
def test_non_empty_args(text):
    assert are_args_empty(text) is False


def test_emptiness_agrees_with_count():
    for text in ["", "a", "a, b", "()", " , "]:
        assert are_args_empty(text) == (args_count(text) == 0)