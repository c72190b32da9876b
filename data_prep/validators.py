"""
Pre-flight checks for a transaction catalog before it is handed to the engine.

The engine itself never validates: malformed records just never apply.
This module tells the caller which records those are, and flags things that
are legal but probably unintended:
- Anchors missing or not "YYYY-MM", directions other than income/expense
- Negative amounts (sign belongs in direction)
- End month before start month
- Unknown or direction-mismatched categories
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.schema import Category, Direction, Recurrence, Transaction
from core.utils import month_index


@dataclass
class ValidationResult:
    """
    Outcome of checking a transaction catalog.

    errors name records the engine will skip in every month (their ids are
    also kept in `never_applies`); warnings name records that project fine
    but look unintended.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    never_applies: List[str] = field(default_factory=list)
    n_checked: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def reject(self, t: Transaction, message: str) -> None:
        self.errors.append(f"Transaction {t.id!r}: {message}")
        if t.id not in self.never_applies:
            self.never_applies.append(t.id)

    def flag(self, t: Transaction, message: str) -> None:
        self.warnings.append(f"Transaction {t.id!r}: {message}")

    def summary(self) -> str:
        lines = [f"{self.n_checked} transaction(s) checked, {len(self.never_applies)} never apply."]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            lines.extend(f"  ✗ {e}" for e in self.errors)
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            lines.extend(f"  ⚠ {w}" for w in self.warnings)
        if not self.errors and not self.warnings:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _direction_label(direction) -> str:
    return direction.value if isinstance(direction, Direction) else str(direction)


def _check_recurring(t: Transaction, result: ValidationResult) -> None:
    start = month_index(t.start_month)
    if t.start_month is None:
        result.reject(t, "recurring without startMonth.")
    elif start is None:
        result.reject(t, f"unparseable startMonth {t.start_month!r}.")

    if t.end_month is not None:
        end = month_index(t.end_month)
        if end is None:
            result.reject(t, f"unparseable endMonth {t.end_month!r}.")
        elif start is not None and end < start:
            result.flag(t, f"endMonth {t.end_month} is before startMonth {t.start_month}; it will never apply.")

    if t.month is not None:
        result.flag(t, "month is ignored for recurring items.")


def validate_transactions(
    transactions: Iterable[Transaction],
    *,
    categories: Optional[Iterable[Category]] = None,
) -> ValidationResult:
    """
    Run all checks on a transaction catalog.
    Errors mark records the engine will not count as given; warnings are informational.
    """
    txns = list(transactions)
    result = ValidationResult(n_checked=len(txns))

    # --- Ids ---
    dup_ids = [i for i, n in Counter(t.id for t in txns).items() if n > 1]
    if dup_ids:
        result.warnings.append(f"{len(dup_ids)} duplicate transaction ids found: {sorted(dup_ids)}")

    by_id = {c.id: c for c in categories} if categories is not None else None

    for t in txns:
        # --- Amount ---
        if t.amount < 0:
            # still projected, as its magnitude
            result.errors.append(
                f"Transaction {t.id!r}: negative amount {t.amount}; store the sign in direction."
            )

        # --- Direction ---
        if t.direction != Direction.INCOME and t.direction != Direction.EXPENSE:
            result.reject(t, f"unknown direction {t.direction!r}.")

        # --- Anchors ---
        if t.recurrence == Recurrence.NONE:
            if t.month is None:
                result.reject(t, "one-off without month.")
            elif month_index(t.month) is None:
                result.reject(t, f"unparseable month {t.month!r}.")
            if t.start_month is not None or t.end_month is not None:
                result.flag(t, "startMonth/endMonth are ignored for one-off items.")
        elif t.recurrence == Recurrence.MONTHLY or t.recurrence == Recurrence.YEARLY:
            _check_recurring(t, result)
        else:
            result.reject(t, f"unknown recurrence {t.recurrence!r}.")

        # --- Category ---
        if by_id is not None:
            cat = by_id.get(t.category_id)
            if cat is None:
                result.flag(t, f"unknown category {t.category_id!r}.")
            elif cat.direction != t.direction and t.direction in (Direction.INCOME, Direction.EXPENSE):
                result.flag(
                    t,
                    f"{_direction_label(t.direction)} in {_direction_label(cat.direction)} "
                    f"category {cat.id!r}.",
                )

    return result
