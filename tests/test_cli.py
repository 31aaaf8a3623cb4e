import pytest

from macrotoys.cli import main
from macrotoys.generators import generate_prepend_append_args, generate_remove_parenthesis
from macrotoys.splitlist import generate_split_list


@pytest.mark.parametrize(
    "name, generator",
    [
        ("split-list", generate_split_list),
        ("prepend-append-args", generate_prepend_append_args),
        ("remove-parenthesis", generate_remove_parenthesis),
    ],
)
def test_prints_header(capsys, name, generator):
    assert main([name]) == 0
    assert capsys.readouterr().out == generator()


def test_writes_output_file(tmp_path, capsys):
    target = tmp_path / "SplitList.h"
    assert main(["split-list", "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == generate_split_list()
    assert capsys.readouterr().out == ""


def test_unknown_header_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["no-such-header"])
    assert info.value.code == 2


def test_missing_header_is_rejected():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2