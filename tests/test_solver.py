from pathlib import Path

import pytest

from rxrenamer.dumpfile import Operation
from rxrenamer.errors import ErrorKind, RenameError
from rxrenamer.solver import revert_operations, solve_rename_order


def _touch(*paths):
    for path in paths:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(path.name)


def test_empty_map():
    assert solve_rename_order({}) == []


def test_simple_rename(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    _touch(a)
    assert solve_rename_order({b: a}) == [Operation(a, b)]


def test_chain_renames_free_target_first(tmp_path):
    a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
    _touch(a, b)
    operations = solve_rename_order({b: a, c: b})
    assert operations == [Operation(b, c), Operation(a, b)]


def test_longer_chain_is_valid_when_applied(tmp_path):
    names = [tmp_path / f"f{i}" for i in range(5)]
    _touch(*names[:4])
    rename_map = {names[i + 1]: names[i] for i in range(4)}
    operations = solve_rename_order(rename_map)
    assert len(operations) == 4
    for op in operations:
        assert not op.target.exists()
        op.source.rename(op.target)
    assert sorted(p.read_text() for p in names[1:]) == ["f0", "f1", "f2", "f3"]


def test_cycle_cannot_be_solved(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    _touch(a, b)
    with pytest.raises(RenameError) as info:
        solve_rename_order({b: a, a: b})
    assert info.value.kind is ErrorKind.SOLVE_ORDER


def test_existing_target_conflict(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    _touch(a, b)
    with pytest.raises(RenameError) as info:
        solve_rename_order({b: a})
    assert info.value.kind is ErrorKind.EXISTING_PATH
    assert info.value.value == f"{a} -> {b}"


def test_deeper_paths_first(tmp_path):
    shallow, deep = tmp_path / "x", tmp_path / "d" / "x"
    _touch(shallow, deep)
    operations = solve_rename_order(
        {tmp_path / "y": shallow, tmp_path / "d" / "y": deep}
    )
    assert [op.source for op in operations] == [deep, shallow]


def test_revert_reverses_and_swaps():
    ops = [Operation(Path("a"), Path("b")), Operation(Path("c"), Path("d"))]
    assert revert_operations(ops) == [
        Operation(Path("d"), Path("c")),
        Operation(Path("b"), Path("a")),
    ]


def test_revert_twice_is_identity():
    ops = [Operation(Path("a"), Path("b")), Operation(Path("b"), Path("c"))]
    assert revert_operations(revert_operations(ops)) == ops