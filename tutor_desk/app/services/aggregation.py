"""Aggregation helpers for earnings and dashboard charts."""

from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any, TypeVar

from tutor_desk.app.core.time import ensure_utc, month_label
from tutor_desk.app.schemas.payment import MonthlyEarnings

T = TypeVar("T")


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value or 0)).quantize(Decimal("0.01"))


def monthly_earnings_from_payments(payments: Iterable[Any]) -> list[MonthlyEarnings]:
    """Sum paid amounts per calendar month of ``paid_at``.

    Rows without ``paid_at`` are skipped. Months appear in first-seen order.
    """
    totals: dict[str, Decimal] = {}
    for payment in payments:
        if payment.paid_at is None:
            continue
        key = month_label(payment.paid_at)
        totals[key] = totals.get(key, Decimal("0.00")) + _to_decimal(payment.amount)
    return [MonthlyEarnings(month=month, total=total) for month, total in totals.items()]


def monthly_earnings_from_rows(rows: Iterable[Any]) -> list[MonthlyEarnings]:
    return [MonthlyEarnings(month=str(row.month), total=_to_decimal(row.total)) for row in rows]


def count_by_day(
    items: Iterable[T],
    timestamp: Callable[[T], datetime],
    label: Callable[[datetime], str],
    chronological: bool = False,
) -> list[dict]:
    """Count items per formatted calendar day.

    Buckets keep encounter order unless ``chronological`` is set, in which case
    they are ordered by the earliest timestamp that fell into each bucket.
    """
    counts: dict[str, int] = {}
    earliest: dict[str, datetime] = {}
    for item in items:
        moment = ensure_utc(timestamp(item))
        key = label(moment)
        counts[key] = counts.get(key, 0) + 1
        if key not in earliest or moment < earliest[key]:
            earliest[key] = moment
    buckets = [{"label": key, "count": count} for key, count in counts.items()]
    if chronological:
        buckets.sort(key=lambda bucket: earliest[bucket["label"]])
    return buckets
