import pytest
import requests

from orders_ui.models.common import Summary
from orders_ui.services.errors import NetworkFailure, ServiceFailure
from orders_ui.services.list_service import CUSTOMERS, SALES
from orders_ui.services.list_service_http import HttpListService, parse_list_response


class _Response:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class _Session:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _service(session):
    return HttpListService(base_url="http://api.test/api/", timeout=5, session=session)


def _sales_body(**data):
    return {
        "success": True,
        "data": {
            "sales": [
                {
                    "id": 9,
                    "orderNumber": "ORD-20240102-0009",
                    "customerName": "Ayesha Khan",
                    "total": "1250.50",
                    "paymentMethod": "card",
                    "status": "completed",
                    "createdBy": "admin",
                }
            ],
            **data,
        },
    }


def test_list_records_parses_envelope():
    body = _sales_body(
        pagination={"totalPages": 3},
        summary={"totalSales": 500, "totalOrders": 2, "avgOrderValue": 250},
    )
    session = _Session(_Response(200, body))

    result = _service(session).list_records(SALES, {"status": "pending"}, page=2, limit=20)

    assert session.requests == [
        {
            "url": "http://api.test/api/sales",
            "params": {"status": "pending", "page": 2, "limit": 20},
            "timeout": 5,
        }
    ]
    assert [sale.order_number for sale in result.items] == ["ORD-20240102-0009"]
    assert result.items[0].total == 1250.5
    assert result.total_pages == 3
    assert result.summary == Summary(total_value=500.0, total_count=2, average_value=250.0)


def test_missing_pagination_and_summary_are_none():
    result = parse_list_response(SALES, _sales_body())

    assert len(result.items) == 1
    assert result.total_pages is None
    assert result.summary is None


def test_non_list_items_become_empty():
    result = parse_list_response(CUSTOMERS, {"success": True, "data": {"customers": "nope"}})

    assert result.items == []


def test_success_false_raises_service_failure():
    session = _Session(_Response(200, {"success": False, "message": "Invalid filters"}))

    with pytest.raises(ServiceFailure) as excinfo:
        _service(session).list_records(SALES)

    assert excinfo.value.message == "Invalid filters"


def test_success_false_without_message_names_resource():
    with pytest.raises(ServiceFailure, match="Failed to load customers"):
        parse_list_response(CUSTOMERS, {"success": False})


def test_transport_error_raises_network_failure():
    session = _Session(error=requests.ConnectionError("connection refused"))

    with pytest.raises(NetworkFailure) as excinfo:
        _service(session).list_records(SALES)

    assert excinfo.value.status_code is None
    assert "connection refused" in excinfo.value.message


def test_error_status_raises_network_failure_with_body_message():
    session = _Session(_Response(500, {"success": False, "message": "Database unavailable"}))

    with pytest.raises(NetworkFailure) as excinfo:
        _service(session).list_records(SALES)

    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "Database unavailable"


def test_error_status_without_body():
    session = _Session(_Response(404))

    with pytest.raises(NetworkFailure, match="HTTP 404"):
        _service(session).list_records(SALES)


def test_non_json_body_raises_service_failure():
    session = _Session(_Response(200))

    with pytest.raises(ServiceFailure):
        _service(session).list_records(SALES)


def test_page_and_limit_are_at_least_one():
    session = _Session(_Response(200, _sales_body()))

    _service(session).list_records(CUSTOMERS, None, page=0, limit=0)

    assert session.requests[0]["url"] == "http://api.test/api/customers"
    assert session.requests[0]["params"] == {"page": 1, "limit": 1}


def test_dotted_keys_inside_records_do_not_fail_the_page():
    body = _sales_body(pagination={"totalPages": 2})
    body["data"]["sales"][0]["meta"] = {"v1.2": "x", "app.version": "3.1"}

    result = parse_list_response(SALES, body)

    assert [sale.id for sale in result.items] == [9]
    assert result.total_pages == 2
