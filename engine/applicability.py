"""
Applicability rules — does a transaction contribute to a given month?

Three recurrence models, all compared on whole months:
  none:    exactly the month named by `month`
  monthly: every month in [start_month, end_month] (both inclusive, end optional)
  yearly:  same window as monthly, but only on start_month's month-of-year

A record whose needed anchor is missing or unparsable, or whose direction is
neither income nor expense, never applies, so one bad record cannot take down
a whole projection run.
"""

from __future__ import annotations

from typing import Optional

from core.schema import Direction, Recurrence, Transaction
from core.utils import month_index, month_of_year

_DIRECTIONS = (Direction.INCOME, Direction.EXPENSE)


def _within_window(current: int, transaction: Transaction) -> Optional[bool]:
    """None when the window itself is malformed."""
    start = month_index(transaction.start_month)
    if start is None:
        return None
    if transaction.end_month is None:
        return current >= start
    end = month_index(transaction.end_month)
    if end is None:
        return None
    return start <= current <= end


def is_well_formed(transaction: Transaction) -> bool:
    """True if the direction is known and the anchors its recurrence needs all parse."""
    if transaction.direction not in _DIRECTIONS:
        return False
    recurrence = transaction.recurrence
    if recurrence == Recurrence.NONE:
        return month_index(transaction.month) is not None
    if recurrence == Recurrence.MONTHLY or recurrence == Recurrence.YEARLY:
        if month_index(transaction.start_month) is None:
            return False
        return transaction.end_month is None or month_index(transaction.end_month) is not None
    return False


def transaction_applies(
    transaction: Transaction,
    month: str,
    *,
    is_first_month: bool = False,
    exclude_recurring_in_first_month: bool = False,
) -> bool:
    if transaction.direction not in _DIRECTIONS:
        return False

    current = month_index(month)
    if current is None:
        return False

    recurrence = transaction.recurrence
    if recurrence == Recurrence.NONE:
        return month_index(transaction.month) == current

    if recurrence == Recurrence.MONTHLY or recurrence == Recurrence.YEARLY:
        if exclude_recurring_in_first_month and is_first_month:
            return False
        if not _within_window(current, transaction):
            return False
        if recurrence == Recurrence.YEARLY:
            return month_of_year(month) == month_of_year(transaction.start_month)
        return True

    # unknown recurrence value
    return False
