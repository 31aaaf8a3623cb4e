import pytest

from macrotoys.arguments import MAX_ARGS, ArgumentLimitError, split_args
from macrotoys.splitlist import generate_split_list, split_list


def test_empty_list_gives_empty_string():
    assert split_list("+", "") == ""
    assert split_list("+", "   ") == ""


def test_single_argument_is_returned_alone():
    assert split_list("&&", " x ") == "x"


def test_two_arguments_follow_source_form():
    assert split_list("delimiter", "arg1, arg2") == "arg1 delimiter arg2"


def test_delimiter_count_is_one_less_than_args():
    args = ", ".join(f"v{n}" for n in range(7))
    result = split_list("|", args)
    assert result.count("|") == 6
    assert result.split(" | ") == split_args(args)


def test_nested_arguments_are_kept_whole():
    result = split_list(";", "f(a, b), c")
    assert result.split(" ; ") == ["f(a, b)", "c"]


def test_maximum_arguments_supported():
    args = ", ".join(f"a{n}" for n in range(MAX_ARGS))
    assert len(split_list("+", args).split(" + ")) == MAX_ARGS


def test_too_many_arguments_raise():
    args = ", ".join(f"a{n}" for n in range(MAX_ARGS + 1))
    with pytest.raises(ArgumentLimitError):
        split_list("+", args)


def test_header_guard_and_ending():
    header = generate_split_list()
    assert header.startswith("\n#ifndef MPT_SPLIT_LIST_H\n#define MPT_SPLIT_LIST_H\n")
    assert header.endswith("\n#endif\n")


def test_header_holds_fixed_rules():
    header = generate_split_list()
    assert "#define INTERNAL_MPT_SPLIT_LIST_0( delimiter )" in header
    assert "#define INTERNAL_MPT_SPLIT_LIST_1( delimiter, arg1 ) arg1" in header
    assert (
        "#define INTERNAL_MPT_SPLIT_LIST_2( delimiter, arg1, arg2 ) arg1 delimiter arg2"
        in header
    )


def test_header_holds_recursive_rule():
    header = generate_split_list()
    assert (
        "#define INTERNAL_MPT_SPLIT_LIST_3( delimiter, arg1, arg2, arg3 ) \\\n"
        "INTERNAL_MPT_SPLIT_LIST_2( delimiter, arg1, arg2 ) delimiter arg3"
    ) in header


def test_header_defines_one_rule_per_count():
    lines = generate_split_list().splitlines()
    rules = [line for line in lines if line.startswith("#define INTERNAL_MPT_SPLIT_LIST_")]
    assert len(rules) == MAX_ARGS + 1
    assert "INTERNAL_MPT_SPLIT_LIST_100" not in generate_split_list()


def test_header_defines_public_macro():
    header = generate_split_list()
    assert "#define MPT_SPLIT_LIST( delimiter, ... )" in header
    assert "(delimiter, __VA_ARGS__)" in header