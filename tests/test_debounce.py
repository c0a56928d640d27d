import asyncio

from orders_ui.browse.debounce import (
    Debouncer,
    SearchSettle,
    is_searching,
    on_search_settle,
)


def test_burst_settles_only_last_value():
    debouncer = Debouncer(delay=0.02)

    async def burst():
        return await asyncio.gather(
            debouncer.submit("s"),
            debouncer.submit("sa"),
            debouncer.submit("sal"),
        )

    assert asyncio.run(burst()) == [None, None, "sal"]
    assert debouncer.settled == "sal"


def test_single_character_never_settles():
    debouncer = Debouncer(delay=0.01)

    assert asyncio.run(debouncer.submit("a")) is None
    assert asyncio.run(debouncer.submit(" a ")) is None
    assert debouncer.settled == ""


def test_cleared_input_settles():
    debouncer = Debouncer(delay=0.01)

    assert asyncio.run(debouncer.submit("ab")) == "ab"
    assert asyncio.run(debouncer.submit("")) == ""
    assert debouncer.settled == ""


def test_values_separated_by_quiet_period_both_settle():
    debouncer = Debouncer(delay=0.01)

    async def typed_slowly():
        first = await debouncer.submit("ord")
        second = await debouncer.submit("order")
        return first, second

    assert asyncio.run(typed_slowly()) == ("ord", "order")


def test_cancel_discards_pending_value():
    debouncer = Debouncer(delay=0.05)

    async def cancelled():
        pending = asyncio.create_task(debouncer.submit("pending"))
        await asyncio.sleep(0)
        debouncer.cancel()
        return await pending

    assert asyncio.run(cancelled()) is None


def test_settle_resets_page():
    assert on_search_settle("abc") == SearchSettle(search_text="abc", page=1)


def test_is_searching_uses_trimmed_length():
    assert not is_searching("")
    assert not is_searching(None)
    assert not is_searching(" a ")
    assert is_searching("ab")
    assert is_searching("abc", min_length=3)
    assert not is_searching("ab", min_length=3)
