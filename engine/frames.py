"""
Tabular views of a projection for chart, list and export consumers.
"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from core.schema import MonthData

PROJECTION_COLUMNS: List[str] = ["month", "income", "expense", "net", "balance", "n_transactions"]
CATEGORY_COLUMNS: List[str] = ["month", "category_id", "total"]


def projection_to_frame(projection: Sequence[MonthData]) -> pd.DataFrame:
    """One row per projected month, in projection order."""
    rows = [
        {
            "month": m.month,
            "income": float(m.income),
            "expense": float(m.expense),
            "net": float(m.net),
            "balance": float(m.balance),
            "n_transactions": len(m.details.transactions),
        }
        for m in projection
    ]
    return pd.DataFrame(rows, columns=PROJECTION_COLUMNS)


def category_totals_frame(projection: Sequence[MonthData]) -> pd.DataFrame:
    """
    Long-format category totals: one row per (month, category) that had flow.
    Categories within a month follow first-seen order.
    """
    rows = [
        {"month": m.month, "category_id": cat_id, "total": float(total)}
        for m in projection
        for cat_id, total in m.details.category_totals.items()
    ]
    return pd.DataFrame(rows, columns=CATEGORY_COLUMNS)
