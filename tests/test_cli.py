import pytest

from etranspile.cli import main


def test_main_runs_entry_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "proj").mkdir()
    (tmp_path / "proj" / "main.e").write_text("#Entry start\n", encoding="utf-8")
    assert main(["proj/main.e"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(">> Compiler started\n")
    assert "Set entry function start" in out
    assert out.endswith(">> Compiler ended\n\n")


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.e"]) == 0
    assert "absent.e is not existing" in capsys.readouterr().out


def test_main_requires_argument():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2