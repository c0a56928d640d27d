import pytest

from orders_ui.browse.aggregate import summarize
from orders_ui.models.common import Summary

from conftest import make_customer


def test_summary_covers_every_record(sales):
    summary = summarize(sales)

    assert summary.total_value == 150
    assert summary.total_count == 5
    assert summary.average_value == pytest.approx(30)


def test_empty_universe_has_zero_average():
    assert summarize([]) == Summary(total_value=0.0, total_count=0, average_value=0.0)


def test_customers_summarize_by_balance():
    customers = [make_customer(1, 1000), make_customer(2, 250.5)]

    summary = summarize(customers)

    assert summary.total_value == pytest.approx(1250.5)
    assert summary.average_value == pytest.approx(625.25)
