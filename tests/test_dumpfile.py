import json
from datetime import datetime
from pathlib import Path

import pytest

from rxrenamer.dumpfile import Operation, dump_to_file, read_from_file
from rxrenamer.errors import ErrorKind, RenameError


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_operation_converts_to_paths():
    op = Operation("a/b.txt", "a/c.txt")
    assert op.source == Path("a/b.txt")
    assert op.target == Path("a/c.txt")


def test_round_trip(in_tmp):
    ops = [Operation("one.txt", "uno.txt"), Operation("dir/two", "dir/dos")]
    written = dump_to_file(ops)
    assert (in_tmp / written).is_file()
    assert read_from_file(written) == ops


def test_round_trip_empty(in_tmp):
    assert read_from_file(dump_to_file([])) == []


def test_file_name_and_date_agree(in_tmp):
    written = dump_to_file([Operation("x", "y")])
    assert written.name.startswith("rx-")
    assert written.suffix == ".json"
    data = json.loads(written.read_text(encoding="utf-8"))
    assert set(data) == {"date", "operations"}
    from_date = datetime.strptime(data["date"], "%Y-%m-%d %H:%M:%S")
    from_name = datetime.strptime(written.stem[len("rx-"):], "%Y-%m-%d_%H%M%S")
    assert from_date == from_name
    assert data["operations"] == [{"source": "x", "target": "y"}]


def test_missing_file_is_read_error(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(RenameError) as info:
        read_from_file(missing)
    assert info.value.kind is ErrorKind.READ_FILE
    assert info.value.value == str(missing)


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"operations": []}',
        '{"date": "d"}',
        '{"date": "d", "operations": [{"source": "a"}]}',
        '{"date": "d", "operations": [{"source": 1, "target": "b"}]}',
    ],
)
def test_malformed_dump_is_parse_error(tmp_path, content):
    bad = tmp_path / "bad.json"
    bad.write_text(content, encoding="utf-8")
    with pytest.raises(RenameError) as info:
        read_from_file(bad)
    assert info.value.kind is ErrorKind.JSON_PARSE