import pytest

from etranspile.model import FileData
from etranspile.tools import Log, contains, trim_text


def test_trim_text_splits_on_any_separator():
    assert trim_text("a//b\\c", "/\\") == ["a", "b", "c"]


def test_trim_text_accepts_list_of_chars():
    assert trim_text("x y,z", [" ", ","]) == trim_text("x y,z", " ,")
    assert trim_text("x y,z", [" ", ","]) == ["x", "y", "z"]


@pytest.mark.parametrize("text", ["", "   ", " "])
def test_trim_text_empty_results(text):
    assert trim_text(text, " ") == []


@pytest.mark.parametrize("text", ["Use  lib.e", " Entry main ", "a b  c d"])
def test_trim_text_invariant(text):
    parts = trim_text(text, " ")
    assert all(parts)
    assert "".join(parts) == text.replace(" ", "")
    assert all(" " not in p for p in parts)


def test_contains():
    items = ["a.e", "b.e"]
    assert contains(items, "b.e") is True
    assert contains(items, "c.e") is False


def test_write_and_write_line(capsys):
    Log.write("hello")
    Log.write_line("world")
    assert capsys.readouterr().out == "hello world\n"


def test_err_format(capsys):
    log = Log(FileData(file_name="main.e", current_line=3))
    log.err("bad thing", "")
    assert capsys.readouterr().out == "\nerror: main.e Line: 3\nbad thing\n"


def test_details_are_printed(capsys):
    log = Log(FileData(file_name="main.e", current_line=7))
    log.warn("careful", "more")
    assert capsys.readouterr().out == "\nwarning: main.e Line: 7\ncareful\nmore\n"


@pytest.mark.parametrize(
    "flag,method",
    [
        ("hide_error", "err"),
        ("hide_warning", "warn"),
        ("hide_suggest", "suggest"),
        ("hide_info", "info"),
    ],
)
def test_hidden_levels_print_nothing(capsys, flag, method):
    log = Log(FileData(file_name="f.e"), **{flag: True})
    getattr(log, method)("msg", "details")
    assert capsys.readouterr().out == ""


def test_suggest_and_info_labels(capsys):
    log = Log(FileData(file_name="f.e", current_line=1))
    log.suggest("s", "")
    log.info("i", "")
    out = capsys.readouterr().out
    assert "suggestion: f.e Line: 1\ns\n" in out
    assert "info: f.e Line: 1\ni\n" in out