import pytest

from mediarename.cli import main, parse_args, run_rename
from mediarename.utils import LogLevel, WORKERS, logger


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("video")
    return path


def test_parse_args_minimal():
    args = parse_args(["rename", "tt0000001", "/in", "/out"])
    assert args.command == "rename"
    assert args.id == "tt0000001"
    assert args.src == "/in"
    assert args.dest == "/out"
    assert args.commit is False
    assert args.copy is False
    assert args.overwrite is False
    assert args.ext is None
    assert args.workers == WORKERS
    assert args.log_level is None


def test_parse_args_all_options():
    args = parse_args([
        "rename", "tt0000001", "/in", "/out",
        "--commit", "--copy", "--overwrite",
        "--ext", ".mkv", "--ext", "m4v",
        "--workers", "3",
        "--log-level", "warning",
    ])
    assert args.commit is True
    assert args.copy is True
    assert args.overwrite is True
    assert args.ext == [".mkv", "m4v"]
    assert args.workers == 3
    assert args.log_level is LogLevel.WARN


def test_parse_args_rejects_bad_workers(capsys):
    with pytest.raises(SystemExit):
        parse_args(["rename", "tt0000001", "/in", "/out", "--workers", "0"])


def test_parse_args_requires_command(capsys):
    with pytest.raises(SystemExit):
        parse_args([])


def test_dry_run_reports_plan(tmp_path, fake_client, capsys):
    src = tmp_path / "in"
    pilot = _touch(src / "Example.Show.S01E01.mkv")
    _touch(src / "notes.txt")
    _touch(src / "random.mkv")
    args = parse_args(["rename", "tt0000001", str(src), str(tmp_path / "out"), "--log-level", "error"])

    assert run_rename(args, client=fake_client) == 0

    out = capsys.readouterr().out
    expected = tmp_path / "out" / "example_show" / "season_01" / "example_show-s01e01-pilot.mkv"
    assert f"{pilot} -> {expected}" in out
    assert "Total files: 1 of 2" in out
    assert "Dry-run mode" in out
    assert pilot.exists()


def test_commit_moves_files(tmp_path, fake_client):
    src = tmp_path / "in"
    _touch(src / "season1" / "show-s01e01-e02.MKV")
    _touch(src / "show-s01e123.mp4")
    args = parse_args(["rename", "tt0000001", str(src), str(tmp_path / "out"), "--commit", "--log-level", "error"])

    assert run_rename(args, client=fake_client) == 0

    season = tmp_path / "out" / "example_show" / "season_01"
    assert sorted(p.name for p in season.iterdir()) == [
        "example_show-s01e01-e02-pilot.MKV",
        "example_show-s01e123-finale.mp4",
    ]
    assert not list(src.rglob("*.mp4"))


def test_catalog_failure_exits_1(tmp_path, make_client, capsys):
    src = tmp_path / "in"
    pilot = _touch(src / "show-s01e01.mkv")
    args = parse_args(["rename", "tt0000001", str(src), str(tmp_path / "out"), "--commit"])

    assert run_rename(args, client=make_client(show_error="non-success status code 500")) == 1

    captured = capsys.readouterr()
    assert "event=catalog.error" in captured.err
    assert "Proposed renames" not in captured.out
    assert pilot.exists()


def test_missing_source_exits_2(tmp_path, fake_client):
    args = parse_args(["rename", "tt0000001", str(tmp_path / "nope"), str(tmp_path / "out")])
    assert run_rename(args, client=fake_client) == 2
    assert fake_client.show_calls == 0


def test_no_candidate_files_exits_2(tmp_path, fake_client):
    _touch(tmp_path / "in" / "readme.txt")
    args = parse_args(["rename", "tt0000001", str(tmp_path / "in"), str(tmp_path / "out")])
    assert run_rename(args, client=fake_client) == 2


def test_debug_flag_sets_level(tmp_path, fake_client):
    _touch(tmp_path / "in" / "show-s01e01.mkv")
    args = parse_args(["rename", "tt0000001", str(tmp_path / "in"), str(tmp_path / "out"), "--debug"])
    run_rename(args, client=fake_client)
    assert logger.get_log_level() is LogLevel.DEBUG


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "mediarename" in capsys.readouterr().out
