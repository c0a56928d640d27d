from orders_ui.sessions import SessionRegistry


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _registry(maxsize=10, ttl=60.0, clock=None):
    return SessionRegistry("test", object, maxsize=maxsize, ttl=ttl, timer=clock or _Clock())


def test_same_token_reuses_session():
    registry = _registry()

    assert registry.get("a") is registry.get("a")
    assert registry.get("a") is not registry.get("b")
    assert len(registry) == 2


def test_least_recently_used_session_is_evicted_when_full():
    registry = _registry(maxsize=2)
    first = registry.get("a")
    registry.get("b")
    registry.get("a")
    registry.get("c")

    assert "a" in registry
    assert "b" not in registry
    assert registry.get("a") is first
    assert len(registry) == 2


def test_many_clients_stay_bounded():
    registry = _registry(maxsize=50)

    for index in range(1000):
        registry.get(f"client-{index}")

    assert len(registry) == 50
    assert "client-0" not in registry
    assert "client-999" in registry


def test_idle_session_expires():
    clock = _Clock()
    registry = _registry(ttl=60.0, clock=clock)
    stale = registry.get("a")

    clock.now = 61.0

    assert "a" not in registry
    assert len(registry) == 0
    assert registry.get("a") is not stale


def test_access_restarts_inactivity_timer():
    clock = _Clock()
    registry = _registry(ttl=60.0, clock=clock)
    session = registry.get("a")

    clock.now = 50.0
    registry.get("a")
    clock.now = 100.0

    assert registry.get("a") is session


def test_discard_drops_session():
    registry = _registry()
    registry.get("a")

    registry.discard("a")
    registry.discard("missing")

    assert "a" not in registry
