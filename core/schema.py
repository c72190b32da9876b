from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class Direction(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Recurrence(str, Enum):
    NONE = "none"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Transaction:
    """
    A single income or expense item.

    `amount` is a non-negative magnitude; the sign lives in `direction`.
    `month` anchors one-off items, `start_month`/`end_month` anchor recurring
    ones (end inclusive, None = open-ended). All anchors are "YYYY-MM" keys.
    """

    id: str
    label: str
    category_id: str
    amount: float
    direction: Direction
    recurrence: Recurrence = Recurrence.NONE
    month: Optional[str] = None
    start_month: Optional[str] = None
    end_month: Optional[str] = None


@dataclass(frozen=True)
class Category:
    id: str
    label: str
    direction: Direction
    color: str


@dataclass(frozen=True)
class MonthDetails:
    category_totals: Dict[str, float] = field(default_factory=dict)
    transactions: Tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class MonthData:
    """One projected month: flows split by direction plus the running balance."""

    month: str
    income: float
    expense: float
    balance: float
    details: MonthDetails = field(default_factory=MonthDetails)

    @property
    def net(self) -> float:
        return self.income - self.expense


# Starter catalog seeded for a fresh budget (warm tones for income, cool for expense).
DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    Category("cat-salary", "Salary", Direction.INCOME, "#fbbf24"),
    Category("cat-dividend", "Dividends", Direction.INCOME, "#f59e0b"),
    Category("cat-rent", "Rent", Direction.EXPENSE, "#3b82f6"),
    Category("cat-food", "Food", Direction.EXPENSE, "#60a5fa"),
    Category("cat-transport", "Transport", Direction.EXPENSE, "#93c5fd"),
)
