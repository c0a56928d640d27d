from orders_ui.browse.cache import ResultCache


def test_empty_cache_is_never_valid():
    cache = ResultCache()

    assert not cache.is_valid_for("all|all|||")
    assert len(cache) == 0


def test_store_makes_cache_valid_for_that_key_only():
    cache = ResultCache()
    cache.store("a", [1, 2, 3])

    assert cache.is_valid_for("a")
    assert not cache.is_valid_for("b")
    assert cache.records == [1, 2, 3]


def test_storing_another_scope_replaces_the_slot():
    cache = ResultCache()
    cache.store("a", [1])
    cache.store("b", [2, 3])

    assert not cache.is_valid_for("a")
    assert cache.is_valid_for("b")
    assert len(cache) == 2


def test_empty_result_is_not_reused():
    cache = ResultCache()
    cache.store("a", [])

    assert cache.scope_key == "a"
    assert not cache.is_valid_for("a")


def test_reset_drops_records_and_keeps_last_seen_key():
    cache = ResultCache()
    cache.store("a", [1])
    cache.reset("b")

    assert cache.scope_key == "b"
    assert cache.records == []
    assert not cache.is_valid_for("a")
