import pytest

from minitools.organizer.cli import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert (args.path, args.by, args.dry_run) == (".", "extension", False)


def test_short_options():
    args = build_parser().parse_args(["-p", "docs", "-b", "date", "--dry-run"])
    assert (args.path, args.by, args.dry_run) == ("docs", "date", True)


def test_invalid_mode_is_rejected():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["--by", "size"])
    assert info.value.code == 2


def test_main_dry_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in").mkdir()
    (tmp_path / "in" / "a.txt").write_text("a")
    assert main(["--path", "in", "--dry-run"]) == 0
    assert "Would move" in capsys.readouterr().out
    assert (tmp_path / "in" / "a.txt").exists()


def test_main_moves(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in").mkdir()
    (tmp_path / "in" / "a.txt").write_text("a")
    assert main(["-p", "in"]) == 0
    assert (tmp_path / "sorted" / "txt" / "a.txt").read_text() == "a"