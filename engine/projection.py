"""
Cash-flow projection — deterministic month-by-month forecast of income,
expense and running balance.

The engine is a pure function: it reads the caller's transactions, never
mutates them, and builds fresh MonthData on every call. There is no implicit
"today"; step 0 is always the caller-supplied starting month. The store that
owns the transactions re-invokes it whenever anything changes.

    balance(i) = balance(i-1) + income(i) - expense(i),  balance(-1) = starting_balance
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from core.config import ProjectionConfig
from core.schema import Direction, MonthData, MonthDetails, Transaction
from core.utils import month_keys

from .applicability import is_well_formed, transaction_applies

logger = logging.getLogger(__name__)


def calculate_projection(
    starting_balance: float,
    starting_month: str,
    transactions: Iterable[Transaction],
    months_count: int = 12,
    *,
    exclude_recurring_in_first_month: bool = False,
) -> List[MonthData]:
    """
    Project `months_count` consecutive months starting at `starting_month`.

    Parameters
    ----------
    starting_balance : float
        Balance before the first projected month's flows.
    starting_month : str
        "YYYY-MM" key of step 0. A malformed key raises ValueError.
    transactions : iterable of Transaction
        Iteration order is kept in each month's details.transactions.
    months_count : int
        Horizon length; non-positive gives an empty projection.
    exclude_recurring_in_first_month : bool
        Alternate policy that drops monthly/yearly items from step 0.
        Off by default, so recurring items count in the starting month.

    Returns
    -------
    List of MonthData, exactly max(months_count, 0) long.
    """
    txns = list(transactions)
    months = month_keys(starting_month, months_count)

    projection: List[MonthData] = []
    balance = starting_balance

    for i, month in enumerate(months):
        income = 0.0
        expense = 0.0
        category_totals: Dict[str, float] = {}
        applied: List[Transaction] = []

        for t in txns:
            if not transaction_applies(
                t,
                month,
                is_first_month=(i == 0),
                exclude_recurring_in_first_month=exclude_recurring_in_first_month,
            ):
                continue

            amount = abs(t.amount)
            if t.direction == Direction.INCOME:
                income += amount
            elif t.direction == Direction.EXPENSE:
                expense += amount
            else:
                # transaction_applies() already rejects unknown directions
                continue

            category_totals[t.category_id] = category_totals.get(t.category_id, 0.0) + amount
            applied.append(t)

        balance += income - expense

        projection.append(
            MonthData(
                month=month,
                income=income,
                expense=expense,
                balance=balance,
                details=MonthDetails(
                    category_totals=category_totals,
                    transactions=tuple(applied),
                ),
            )
        )

    if logger.isEnabledFor(logging.DEBUG):
        n_bad = sum(1 for t in txns if not is_well_formed(t))
        logger.debug(
            "Projected %d months from %s over %d transactions (%d never applicable)",
            len(projection), starting_month, len(txns), n_bad,
        )

    return projection


def run_projection(
    transactions: Iterable[Transaction],
    config: ProjectionConfig,
) -> List[MonthData]:
    """Config-driven entry point; see calculate_projection()."""
    return calculate_projection(
        config.starting_balance,
        config.starting_month,
        transactions,
        config.months_count,
        exclude_recurring_in_first_month=config.exclude_recurring_in_first_month,
    )
