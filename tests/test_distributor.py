import pytest

from distributor import distribute, resolve_thread_count


def test_partitions_are_disjoint_and_cover_input() -> None:
    files = [f"/root/f{i}" for i in range(11)]
    partitions = distribute(files, 3)
    assert len(partitions) == 3
    flat = [f for p in partitions for f in p]
    assert sorted(flat) == sorted(files)
    assert len(flat) == len(set(flat))
    restored = sorted(flat, key=files.index)
    assert restored == files


def test_round_robin_assignment() -> None:
    files = ["a", "b", "c", "d", "e"]
    assert distribute(files, 2) == [["a", "c", "e"], ["b", "d"]]


def test_distribution_is_deterministic() -> None:
    files = [f"x{i}" for i in range(20)]
    assert distribute(files, 7) == distribute(list(files), 7)


def test_single_worker_gets_everything() -> None:
    files = ["b", "a", "c"]
    assert distribute(files, 1) == [["b", "a", "c"]]


def test_more_workers_than_files() -> None:
    partitions = distribute(["a", "b"], 8)
    assert len(partitions) == 8
    assert partitions[0] == ["a"]
    assert partitions[1] == ["b"]
    assert sum(1 for p in partitions if not p) == 6


def test_zero_workers_rejected() -> None:
    with pytest.raises(ValueError):
        distribute(["a"], 0)


def test_resolve_thread_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("distributor.os.cpu_count", lambda: 6)
    assert resolve_thread_count(0) == 6
    assert resolve_thread_count(None) == 6
    assert resolve_thread_count(3) == 3


def test_resolve_thread_count_without_cpu_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("distributor.os.cpu_count", lambda: None)
    assert resolve_thread_count(0) == 1


def test_resolve_negative_thread_count() -> None:
    with pytest.raises(ValueError):
        resolve_thread_count(-2)
