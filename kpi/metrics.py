"""
Dashboard KPIs — the handful of numbers shown above the cash-flow chart.

  Current balance: balance at the end of the first projected month
  Target balance:  balance at the end of the horizon
  Lowest point:    minimum running balance and when it happens
  Risk:            whether the balance ever goes negative
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from core.schema import MonthData


@dataclass
class ProjectionKPIs:
    """Structured KPI output for one projection."""
    start_month: str
    end_month: str

    current_balance: float
    target_balance: float
    min_balance: float
    min_balance_month: str

    is_at_risk: bool
    first_negative_month: Optional[str]

    total_income: float
    total_expense: float

    flags: List[str] = field(default_factory=list)

    @property
    def net_flow(self) -> float:
        return self.total_income - self.total_expense

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Horizon", "Value": f"{self.start_month} → {self.end_month}"},
            {"Metric": "Current Balance", "Value": f"{self.current_balance:,.2f}"},
            {"Metric": "Target Balance", "Value": f"{self.target_balance:,.2f}"},
            {"Metric": "Lowest Balance", "Value": f"{self.min_balance:,.2f} ({self.min_balance_month})"},
            {"Metric": "Total Income", "Value": f"{self.total_income:,.2f}"},
            {"Metric": "Total Expense", "Value": f"{self.total_expense:,.2f}"},
            {"Metric": "Net Flow", "Value": f"{self.net_flow:,.2f}"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def compute_projection_kpis(projection: Sequence[MonthData]) -> ProjectionKPIs:
    """
    Summarize a projection into dashboard KPIs.

    Raises ValueError on an empty projection (nothing to summarize).
    """
    if len(projection) == 0:
        raise ValueError("No projected months to summarize.")

    months = [m.month for m in projection]
    balances = np.array([m.balance for m in projection], dtype=float)
    income = np.array([m.income for m in projection], dtype=float)
    expense = np.array([m.expense for m in projection], dtype=float)

    i_min = int(np.argmin(balances))  # first occurrence on ties
    negative = np.flatnonzero(balances < 0)
    first_negative = months[int(negative[0])] if negative.size else None

    flags: List[str] = []
    if first_negative is not None:
        flags.append(f"NEGATIVE BALANCE from {first_negative} ({negative.size} month(s) below zero)")
    deficit_months = int((income < expense).sum())
    if deficit_months > len(months) / 2:
        flags.append(f"SPENDING EXCEEDS INCOME in {deficit_months} of {len(months)} months")

    return ProjectionKPIs(
        start_month=months[0],
        end_month=months[-1],
        current_balance=float(balances[0]),
        target_balance=float(balances[-1]),
        min_balance=float(balances[i_min]),
        min_balance_month=months[i_min],
        is_at_risk=bool(balances[i_min] < 0),
        first_negative_month=first_negative,
        total_income=float(income.sum()),
        total_expense=float(expense.sum()),
        flags=flags,
    )
