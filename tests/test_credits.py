import asyncio

import pytest

from orders_ui.browse.credits import CreditsBrowser
from orders_ui.browse.scope import ALL
from orders_ui.services.errors import NetworkFailure

from conftest import FakeListService, make_customer


@pytest.fixture
def customers():
    return [
        make_customer(1, 0),
        make_customer(2, 12500, name="Bilal Ahmed", phone="0321-7654321"),
        make_customer(3, 48000, name="Chaudhry Traders", email="accounts@chaudhry.pk"),
        make_customer(4, 3250, name="Erum Siddiqui"),
    ]


def test_load_keeps_customers_with_credit(customers):
    service = FakeListService(customers)
    browser = CreditsBrowser(service, limit=250)

    assert asyncio.run(browser.load())

    assert [customer.id for customer in browser.customers] == [2, 3, 4]
    assert not browser.is_loading
    assert service.calls == [
        {
            "resource": "customers",
            "filters": {"status": "active"},
            "page": 1,
            "limit": 250,
        }
    ]


def test_summary_covers_all_customers_with_credit(customers):
    browser = CreditsBrowser(FakeListService(customers), limit=250)
    asyncio.run(browser.load())
    browser.search_text = "bilal"

    summary = browser.summary

    assert summary.total_value == 63750
    assert summary.total_count == 3
    assert summary.average_value == pytest.approx(21250)


def test_search_matches_name_phone_and_email(customers):
    browser = CreditsBrowser(FakeListService(customers), limit=250)
    asyncio.run(browser.load())

    browser.search_text = "7654"
    assert [customer.id for customer in browser.visible] == [2]

    browser.search_text = "CHAUDHRY.PK"
    assert [customer.id for customer in browser.visible] == [3]

    browser.search_text = ""
    assert len(browser.visible) == 3


def test_selection_narrows_to_one_customer(customers):
    browser = CreditsBrowser(FakeListService(customers), limit=250)
    asyncio.run(browser.load())

    browser.selected_customer_id = "4"
    assert [customer.id for customer in browser.visible] == [4]

    browser.search_text = "bilal"
    assert browser.visible == []

    browser.selected_customer_id = ALL
    assert [customer.id for customer in browser.visible] == [2]


def test_failed_load_queues_notice(customers):
    service = FakeListService(customers)
    service.error = NetworkFailure("")
    browser = CreditsBrowser(service, limit=250)

    assert not asyncio.run(browser.load())

    assert browser.customers == []
    assert not browser.is_loading
    assert [notice.message for notice in browser.take_notices()] == [
        "Failed to load customers"
    ]
