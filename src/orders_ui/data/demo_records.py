"""
Deterministic demo sales and customers.

Records are generated from small template tables so the demo service has
enough volume to exercise pagination and search without a backend. The
payloads use the same camelCase shape as the remote API.
"""

from datetime import date, timedelta

_CUSTOMERS = [
    ("Ayesha Khan", "0300-1234567", "ayesha.khan@example.com", "retail"),
    ("Bilal Ahmed", "0321-7654321", "bilal.ahmed@example.com", "wholesale"),
    ("Chaudhry Traders", "042-35761234", "accounts@chaudhrytraders.pk", "wholesale"),
    ("Danish Malik", "0333-1112223", "", "retail"),
    ("Erum Siddiqui", "0345-9988776", "erum.s@example.com", "retail"),
    ("Faisal Electronics", "051-2233445", "info@faisalelectronics.pk", "wholesale"),
    ("Ghazala Yousuf", "", "ghazala.y@example.com", "retail"),
    ("Hamza Qureshi", "0312-4455667", "hamza.q@example.com", "retail"),
    ("Iqra Stores", "021-34567890", "orders@iqrastores.pk", "wholesale"),
    ("Junaid Raza", "0301-2020202", "", "retail"),
    ("Kiran Baig", "0322-3030303", "kiran.baig@example.com", "retail"),
    ("Lahore Mart", "042-37000111", "purchasing@lahoremart.pk", "wholesale"),
]

_BALANCES = [0, 12500, 48000, 0, 3250, 91000, 0, 780, 15400, 0, 0, 22600]

_PRODUCTS = [
    (101, "Basmati Rice 5kg", 1850.0),
    (102, "Cooking Oil 3L", 1420.0),
    (103, "Sugar 1kg", 165.0),
    (104, "Tea Leaves 950g", 1290.0),
    (105, "Wheat Flour 10kg", 1380.0),
    (106, "Lentils 1kg", 420.0),
    (107, "Dishwash Liquid", 310.0),
    (108, "Laundry Detergent 2kg", 960.0),
]

_PAYMENT_METHODS = ["cash", "card", "credit", "bank_transfer"]
_STATUSES = ["completed", "completed", "completed", "pending", "refunded"]
_CASHIERS = ["admin", "sara.cashier", "usman.cashier"]

_SALE_COUNT = 137
_START_DATE = date(2024, 1, 2)


def _customers() -> list[dict]:
    return [
        {
            "id": index + 1,
            "name": name,
            "phone": phone,
            "email": email,
            "type": kind,
            "status": "inactive" if index == 9 else "active",
            "currentBalance": _BALANCES[index],
        }
        for index, (name, phone, email, kind) in enumerate(_CUSTOMERS)
    ]


def _sale(index: int) -> dict:
    walk_in = index % 7 == 0
    customer_index = (index * 5) % len(_CUSTOMERS)
    sale_date = _START_DATE + timedelta(days=index // 3)
    items = []
    for offset in range(1 + index % 3):
        product_id, product_name, unit_price = _PRODUCTS[(index + offset * 3) % len(_PRODUCTS)]
        quantity = 1 + (index + offset) % 4
        items.append(
            {
                "productId": product_id,
                "productName": product_name,
                "quantity": quantity,
                "unitPrice": unit_price,
                "total": unit_price * quantity,
            }
        )
    subtotal = sum(item["total"] for item in items)
    discount = 100.0 if index % 5 == 0 else 0.0
    tax = round((subtotal - discount) * 0.05, 2)
    hour, minute = 9 + index % 10, (index * 7) % 60
    return {
        "id": index + 1,
        "orderNumber": f"ORD-{sale_date:%Y%m%d}-{index + 1:04d}",
        "customerId": None if walk_in else customer_index + 1,
        "customerName": None if walk_in else _CUSTOMERS[customer_index][0],
        "date": sale_date.isoformat(),
        "time": f"{hour:02d}:{minute:02d}",
        "items": items,
        "subtotal": subtotal,
        "discount": discount,
        "tax": tax,
        "total": round(subtotal - discount + tax, 2),
        "paymentMethod": _PAYMENT_METHODS[index % len(_PAYMENT_METHODS)],
        "status": _STATUSES[index % len(_STATUSES)],
        "createdBy": _CASHIERS[index % len(_CASHIERS)],
        "createdAt": f"{sale_date.isoformat()}T{hour:02d}:{minute:02d}:00Z",
    }


# Newest first, matching the ordering of the live endpoint.
DEMO_SALES: list[dict] = [_sale(index) for index in reversed(range(_SALE_COUNT))]

DEMO_CUSTOMERS: list[dict] = _customers()
