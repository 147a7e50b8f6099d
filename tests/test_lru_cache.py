from algodojo.algorithm.lru_cache import LruCache


def test_get_empty():
    cache = LruCache(0)
    assert cache.get(0) is None


def test_update_key_timestamp_on_get():
    cache = LruCache(2)
    cache.insert(0, 42)
    cache.insert(1, 2045)

    assert cache.get(0) == 42

    cache.insert(2, 2023)

    assert cache.get(0) == 42
    assert cache.get(1) is None
    assert cache.get(2) == 2023


def test_insert_key():
    cache = LruCache(1)
    cache.insert(0, 42)
    assert cache.get(0) == 42


def test_insert_keys():
    cache = LruCache(2)
    cache.insert(0, 42)
    cache.insert(1, 2045)
    assert cache.get(0) == 42
    assert cache.get(1) == 2045


def test_push_away_key_out_of_one_by_insert():
    cache = LruCache(1)
    cache.insert(0, 42)
    cache.insert(1, 2045)
    assert cache.get(0) is None
    assert cache.get(1) == 2045


def test_push_away_key_out_of_two_by_insert():
    cache = LruCache(2)
    cache.insert(0, 42)
    cache.insert(1, 2023)
    cache.insert(2, 2045)
    assert cache.get(0) is None
    assert cache.get(1) == 2023
    assert cache.get(2) == 2045


def test_overwrite_keeps_single_entry():
    cache = LruCache(2)
    cache.insert("a", 1)
    cache.insert("a", 2)
    cache.insert("b", 3)
    assert cache.get("a") == 2
    assert cache.get("b") == 3


def test_zero_capacity_holds_nothing():
    cache = LruCache(0)
    cache.insert(0, 42)
    assert cache.get(0) is None