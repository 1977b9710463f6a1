import pytest

from cmdassist.core.normalizer import normalize


def test_collapses_space_runs():
    assert normalize("ls    -la   /tmp") == "ls -la /tmp"


def test_trims():
    assert normalize("   git status  ") == "git status"


def test_single_space_after_operators():
    assert normalize("cat f |   grep x >   out <  in") == "cat f | grep x > out < in"


def test_no_space_inserted_after_bare_operator():
    assert normalize("grep 'a|b' file") == "grep 'a|b' file"


def test_already_normal_is_unchanged():
    cmd = "cat file | grep foo > out"
    assert normalize(cmd) == cmd


def test_empty():
    assert normalize("") == ""
    assert normalize("     ") == ""


@pytest.mark.parametrize("cmd", [
    "  a  b  ",
    "x |  y",
    "\t ls   -l \t",
    "echo  '  spaced  '",
    "",
])
def test_idempotent(cmd):
    once = normalize(cmd)
    assert normalize(once) == once
