import json
import subprocess
from unittest import mock

from rxrenamer.main import main

SUCCESS = "File(s) renamed successfully!"


def test_dry_run_prints_operation(tmp_path, capsys):
    source = tmp_path / "foo.txt"
    source.write_text("")
    assert main(["foo", "bar", str(source), "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert f"{source} -> {tmp_path / 'bar.txt'}" in out
    assert SUCCESS in out
    assert source.exists()


def test_force_renames_and_dumps(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "foo.txt"
    source.write_text("data")
    assert main(["foo", "bar", str(source), "-f", "-s"]) == 0
    assert (tmp_path / "bar.txt").read_text() == "data"
    assert len(list(tmp_path.glob("rx-*.json"))) == 1


def test_force_no_dump(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "foo.txt"
    source.write_text("data")
    assert main(["foo", "bar", str(source), "-f", "--no-dump", "-s"]) == 0
    assert (tmp_path / "bar.txt").exists()
    assert list(tmp_path.glob("rx-*.json")) == []


def test_bad_expression(capsys):
    assert main(["(", "b", "p"]) == 1
    assert "Bad Expression provided" in capsys.readouterr().err


def test_conflict_reported(tmp_path, capsys):
    paths = [tmp_path / "a1", tmp_path / "a2"]
    for path in paths:
        path.write_text("")
    assert main([r"\d", "", *map(str, paths), "--color", "never"]) == 1
    assert "Files will have the same name" in capsys.readouterr().err


def _accept_all(args, **kwargs):
    path = args[1]
    with open(path, encoding="utf-8") as handle:
        operations = json.load(handle)
    for op in operations:
        op["status"] = True
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(operations, handle)
    return subprocess.CompletedProcess(args, 0)


def test_interactive_applies_accepted(tmp_path):
    source = tmp_path / "foo.txt"
    source.write_text("data")
    with mock.patch("rxrenamer.interactive.subprocess.run", side_effect=_accept_all):
        assert main(["-i", "-s", "foo", "bar", str(source)]) == 0
    assert (tmp_path / "bar.txt").read_text() == "data"
    assert not source.exists()


def test_interactive_editor_failure(tmp_path, capsys):
    source = tmp_path / "foo.txt"
    source.write_text("data")
    failed = subprocess.CompletedProcess(["vim"], 1)
    with mock.patch("rxrenamer.interactive.subprocess.run", return_value=failed):
        assert main(["-i", "--color", "never", "foo", "bar", str(source)]) == 1
    assert "Cannot Rename" in capsys.readouterr().err
    assert source.exists()