import logging
import threading

import pytest

from lyric_syllables.cache import LineCache


def test_get_does_not_reorder_entries():
    cache: LineCache[str, int] = LineCache(capacity=3)
    for idx, key in enumerate("abc"):
        cache.put(key, idx)
    assert cache.get("a") == 0
    cache.put("d", 3)
    # "a" was read but is still the oldest, so it is evicted first.
    assert cache.keys() == ["b", "c", "d"]


def test_overflow_evicts_oldest_batch():
    """Inserting C + 1 keys drops exactly the earliest max(1, C // 10) keys."""
    capacity = 20
    cache: LineCache[int, str] = LineCache(capacity=capacity)
    for key in range(capacity + 1):
        cache.put(key, str(key))

    evicted = cache.eviction_batch
    assert evicted == 2
    assert len(cache) == capacity - evicted + 1
    assert 0 not in cache and 1 not in cache
    assert capacity in cache
    assert cache.keys()[0] == 2


def test_small_capacity_evicts_at_least_one():
    cache: LineCache[str, int] = LineCache(capacity=5)
    assert cache.eviction_batch == 1
    for idx in range(6):
        cache.put(f"k{idx}", idx)
    assert len(cache) == 5
    assert "k0" not in cache
    assert "k5" in cache


def test_default_capacity_batch():
    cache: LineCache[str, int] = LineCache()
    assert cache.capacity == 2000
    assert cache.eviction_batch == 200


def test_info_tracks_hits_misses_and_evictions():
    cache: LineCache[str, int] = LineCache(capacity=2, eviction_ratio=1.0)
    cache.put("a", 1)
    assert cache.get("a") == 1
    assert cache.get("missing") is None
    cache.put("b", 2)
    cache.put("c", 3)

    info = cache.info()
    assert info.hits == 1
    assert info.misses == 1
    assert info.evictions == 2
    assert info.size == 1


@pytest.mark.parametrize(
    "capacity, ratio",
    [(0, 0.1), (-1, 0.1), (10, 0.0), (10, 1.5)],
)
def test_invalid_settings_raise(capacity: int, ratio: float):
    with pytest.raises(ValueError):
        LineCache(capacity=capacity, eviction_ratio=ratio)


def test_concurrent_puts_stay_bounded():
    cache: LineCache[tuple[int, int], int] = LineCache(capacity=50)

    def writer(worker: int) -> None:
        for idx in range(200):
            cache.put((worker, idx), idx)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert 0 < len(cache) <= 50


def test_eviction_log_reports_entries_removed(caplog):
    cache: LineCache[int, int] = LineCache(capacity=20)
    with caplog.at_level(logging.DEBUG, logger="lyric_syllables.cache"):
        for key in range(21):
            cache.put(key, key)
    assert "Evicted 2 cache entries (capacity 20)" in caplog.text
    assert cache.info().evictions == 2
