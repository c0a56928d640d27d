"""Summary aggregation over a record universe."""

from typing import Iterable

from orders_ui.models.common import Summary
from orders_ui.models.record import Record


def summarize(records: Iterable[Record]) -> Summary:
    """
    Reduce records to total value, count and average value.

    Args:
        records: Every record in the universe being paginated, not just
            the visible page.

    Returns:
        Summary with average_value 0 when there are no records.
    """
    total_value = 0.0
    total_count = 0
    for record in records:
        total_value += record.value
        total_count += 1
    average_value = total_value / total_count if total_count else 0.0
    return Summary(
        total_value=total_value,
        total_count=total_count,
        average_value=average_value,
    )
