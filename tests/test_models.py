import pytest

from orders_ui.models.common import BrowseView, PageWindow
from orders_ui.models.reflex_models import to_customer_model, to_sale_model
from orders_ui.utils import matches_query, to_float, to_int

from conftest import make_customer, make_sale


def test_parse_sale_reads_camel_case_payload():
    sale = make_sale(
        7,
        "1250.5",
        customerId="3",
        items=[
            {"productId": 101, "productName": "Rice", "quantity": 2, "unitPrice": 500, "total": 1000},
            {"productId": 102, "productName": "Oil", "quantity": "1", "unitPrice": 250.5, "total": 250.5},
            "garbage",
        ],
    )

    assert sale.order_number == "ORD-0007"
    assert sale.customer_id == 3
    assert sale.total == 1250.5
    assert sale.value == 1250.5
    assert sale.item_count == 3
    assert len(sale.items) == 2


def test_parse_sale_tolerates_missing_fields():
    sale = make_sale(1, None, customerName=None, customerId=None, items=None)

    assert sale.customer_name == ""
    assert sale.customer_id is None
    assert sale.total == 0.0
    assert sale.items == ()


def test_sale_searchable_terms_are_lowercase():
    sale = make_sale(1, 10, customerName="Ayesha Khan", createdBy="Sara.Cashier")

    assert sale.searchable_terms() == ["ord-0001", "ayesha khan", "sara.cashier", "cash"]


def test_customer_credit():
    assert make_customer(1, 10).has_credit
    assert not make_customer(2, 0).has_credit
    assert not make_customer(3, "n/a").has_credit


def test_matches_query_on_any_term():
    sale = make_sale(1, 10, customerName="Ayesha Khan", paymentMethod="bank_transfer")

    assert matches_query(sale, "")
    assert matches_query(sale, "KHAN")
    assert matches_query(sale, " bank_ ")
    assert not matches_query(sale, "card")


def test_page_window():
    window = PageWindow(page=2, page_size=20)

    assert window.slice(list(range(45))) == list(range(20, 40))
    assert window.total_pages(45) == 3
    assert window.total_pages(0) == 1
    assert PageWindow(page=0).page == 1
    with pytest.raises(ValueError):
        PageWindow(page_size=0)


def test_browse_view_empty_state():
    assert BrowseView().is_empty
    assert not BrowseView(is_loading=True).is_empty


def test_scalar_coercion():
    assert to_float("12.5") == 12.5
    assert to_float(True) == 0.0
    assert to_int("3.0") == 3
    assert to_int(None) == 0


def test_display_models_format_currency():
    sale_model = to_sale_model(make_sale(1, 1234.5, customerName=None), "PKR")
    customer_model = to_customer_model(make_customer(4, 48000), "USD")

    assert sale_model.customer_name == "Walk-in Customer"
    assert sale_model.total == "PKR 1,234.50"
    assert customer_model.id == "4"
    assert customer_model.current_balance == "USD 48,000.00"
