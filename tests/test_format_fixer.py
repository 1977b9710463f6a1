from pathlib import Path
from unittest.mock import patch

import pytest

from cmdassist.core.errors import FixFailedError, NotFoundError
from cmdassist.core.format_checker import check_file
from cmdassist.core.format_fixer import backup_path_for, fix_format, fix_text


def _write(tmp_path, data: bytes, name: str = "sample.txt"):
    path = tmp_path / name
    path.write_bytes(data)
    return path


# --- fix_text ---

def test_tab_and_trailing_whitespace():
    assert fix_text("foo\t") == "foo\n"


def test_inner_tab_expanded():
    assert fix_text("\tfoo\tbar\n") == "    foo    bar\n"


def test_newline_not_multiplied():
    assert fix_text("a\n") == "a\n"


def test_trailing_blank_lines_kept():
    assert fix_text("a\n\n") == "a\n\n"


def test_crlf_becomes_lf():
    assert fix_text("one\r\ntwo\r\n") == "one\ntwo\n"


def test_empty_stays_empty():
    assert fix_text("") == ""


def test_whitespace_only_file():
    assert fix_text("   \t ") == ""


# --- fix_format ---

def test_fix_format_rewrites_and_backs_up(tmp_path):
    path = _write(tmp_path, b"foo\t")
    result = fix_format(path)

    assert path.read_bytes() == b"foo\n"
    assert result.changed is True
    assert result.backup_path == tmp_path / "sample.txt.backup"
    assert result.backup_path.read_bytes() == b"foo\t"


def test_fix_format_is_idempotent(tmp_path):
    path = _write(tmp_path, b"\tdef f():  \n\t\treturn 1\t\nlast")
    fix_format(path)
    first = path.read_bytes()

    result = fix_format(path)
    assert path.read_bytes() == first
    assert result.changed is False
    # Second run backs up the already-fixed content
    assert result.backup_path.read_bytes() == first


def test_fixed_file_passes_whitespace_checks(tmp_path):
    path = _write(tmp_path, b"a  \n\tb\t\n c\n")
    fix_format(path)
    report = check_file(path)
    assert report.trailing_ws == 0
    assert report.mixed_indentation is False


def test_backup_overwritten(tmp_path):
    path = _write(tmp_path, b"new \n")
    backup_path_for(path).write_bytes(b"stale backup")
    fix_format(path)
    assert backup_path_for(path).read_bytes() == b"new \n"


def test_undecodable_bytes_preserved(tmp_path):
    path = _write(tmp_path, b"caf\xe9 \n")
    fix_format(path)
    assert path.read_bytes() == b"caf\xe9\n"
    assert backup_path_for(path).read_bytes() == b"caf\xe9 \n"


def test_mode_preserved(tmp_path):
    path = _write(tmp_path, b"#!/bin/sh \n", name="run.sh")
    path.chmod(0o750)
    fix_format(path)
    assert path.stat().st_mode & 0o777 == 0o750


def test_missing_file(tmp_path):
    with pytest.raises(NotFoundError, match="File not found"):
        fix_format(tmp_path / "missing.txt")
    assert not (tmp_path / "missing.txt.backup").exists()


def test_backup_failure_leaves_original(tmp_path):
    path = _write(tmp_path, b"keep me \n")
    backup_path_for(path).mkdir()
    with pytest.raises(FixFailedError, match="backup failed"):
        fix_format(path)
    assert path.read_bytes() == b"keep me \n"


def test_rewrite_failure_keeps_backup(tmp_path):
    path = _write(tmp_path, b"keep me \n")
    with patch("cmdassist.core.format_fixer.os.replace", side_effect=OSError("permission denied")):
        with pytest.raises(FixFailedError) as excinfo:
            fix_format(path)
    assert path.read_bytes() == b"keep me \n"
    assert excinfo.value.backup_path.read_bytes() == b"keep me \n"
    # No temp files left behind
    assert sorted(p.name for p in tmp_path.iterdir()) == ["sample.txt", "sample.txt.backup"]


def test_file_read_once_for_backup_and_fix(tmp_path):
    path = _write(tmp_path, b"once \n")
    with patch.object(Path, "read_bytes", autospec=True, side_effect=Path.read_bytes) as read_bytes:
        fix_format(path)
    assert read_bytes.call_count == 1
    assert backup_path_for(path).read_bytes() == b"once \n"


def test_only_posix_whitespace_stripped():
    assert fix_text("nbsp\u00a0\n") == "nbsp\u00a0\n"
    assert fix_text("sep\x1f \n") == "sep\x1f\n"
    assert fix_text("ff\f\v\n") == "ff\n"
