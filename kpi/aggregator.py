"""
Aggregate per-month category totals over the whole horizon.

Feeds the category breakdown next to the chart: how much each category
moves over the projection, its monthly average, and its share of all flow.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

import pandas as pd

from core.schema import Category, Direction, MonthData
from engine.frames import category_totals_frame

SUMMARY_COLUMNS = ["category_id", "label", "direction", "color", "total", "monthly_mean", "share"]


def summarize_categories(
    projection: Sequence[MonthData],
    categories: Optional[Iterable[Category]] = None,
) -> pd.DataFrame:
    """
    One row per category, sorted by horizon total (descending).

    Parameters
    ----------
    projection : sequence of MonthData
        Engine output.
    categories : iterable of Category, optional
        Catalog used for label/direction/color. Catalog categories with no
        flow in the horizon are included with a zero total. Categories seen in
        the projection but absent from the catalog keep their id as label.

    Returns
    -------
    DataFrame with columns: category_id, label, direction, color, total,
    monthly_mean (total / number of projected months), share (of all flow).
    """
    catalog: Dict[str, Category] = {c.id: c for c in categories} if categories is not None else {}
    n_months = len(projection)

    long = category_totals_frame(projection)
    totals = long.groupby("category_id", sort=False)["total"].sum()

    ids = list(catalog.keys()) + [c for c in totals.index if c not in catalog]
    if not ids:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grand_total = float(totals.sum())
    rows = []
    for cat_id in ids:
        total = float(totals.get(cat_id, 0.0))
        cat = catalog.get(cat_id)
        rows.append({
            "category_id": cat_id,
            "label": cat.label if cat is not None else cat_id,
            "direction": Direction(cat.direction).value if cat is not None else None,
            "color": cat.color if cat is not None else None,
            "total": total,
            "monthly_mean": total / n_months if n_months > 0 else 0.0,
            "share": total / grand_total if grand_total > 0 else 0.0,
        })

    out = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return out.sort_values("total", ascending=False, kind="stable").reset_index(drop=True)
