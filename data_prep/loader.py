"""
Turn the store's persisted records into engine inputs.

The store serializes its state as JSON with camelCase keys (categoryId,
startMonth, endMonth), optionally wrapped as {"state": {...}, "version": n}.
Month fields are deliberately kept as free strings here: a malformed month
survives loading and simply never applies in the engine.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.config import ProjectionConfig
from core.schema import DEFAULT_CATEGORIES, Category, Direction, Recurrence, Transaction
from core.utils import current_month_key

logger = logging.getLogger(__name__)


class TransactionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    label: str = ""
    category_id: str = Field(alias="categoryId")
    amount: float
    direction: Direction
    recurrence: Recurrence = Recurrence.NONE
    month: Optional[str] = None
    start_month: Optional[str] = Field(default=None, alias="startMonth")
    end_month: Optional[str] = Field(default=None, alias="endMonth")

    def to_transaction(self) -> Transaction:
        return Transaction(
            id=self.id,
            label=self.label,
            category_id=self.category_id,
            amount=self.amount,
            direction=self.direction,
            recurrence=self.recurrence,
            month=self.month or None,
            start_month=self.start_month or None,
            end_month=self.end_month or None,
        )


class CategoryRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    label: str
    direction: Direction
    color: str = "#9ca3af"

    def to_category(self) -> Category:
        return Category(id=self.id, label=self.label, direction=self.direction, color=self.color)


def split_signed_amount(value: float) -> Tuple[Direction, float]:
    """Normalize a user-entered signed amount: negative means expense."""
    value = float(value)
    if value < 0:
        return Direction.EXPENSE, -value
    return Direction.INCOME, value


def load_transactions(
    records: Iterable[Mapping[str, Any]],
    *,
    strict: bool = False,
) -> List[Transaction]:
    """
    Parse raw records into Transactions, keeping input order.

    Records that fail validation (missing id, unknown direction, ...) are
    skipped with a warning, or raise ValueError when `strict`.
    """
    out: List[Transaction] = []
    for pos, rec in enumerate(records):
        try:
            out.append(TransactionRecord.model_validate(rec).to_transaction())
        except ValidationError as exc:
            if strict:
                raise ValueError(f"Invalid transaction record at position {pos}: {exc}") from exc
            logger.warning("Skipping invalid transaction record at position %d: %s", pos, exc)
    return out


def load_categories(records: Optional[Iterable[Mapping[str, Any]]]) -> List[Category]:
    """Parse category records; None falls back to the default catalog."""
    if records is None:
        return list(DEFAULT_CATEGORIES)
    out: List[Category] = []
    for pos, rec in enumerate(records):
        try:
            out.append(CategoryRecord.model_validate(rec).to_category())
        except ValidationError as exc:
            logger.warning("Skipping invalid category record at position %d: %s", pos, exc)
    return out


@dataclass(frozen=True)
class FinanceSnapshot:
    """Everything the store persists that a projection run needs."""
    starting_month: str
    starting_balance: float = 0.0
    transactions: Tuple[Transaction, ...] = ()
    categories: Tuple[Category, ...] = field(default=DEFAULT_CATEGORIES)

    def to_config(self, months_count: int = 12, **kwargs: Any) -> ProjectionConfig:
        return ProjectionConfig(
            starting_month=self.starting_month,
            starting_balance=self.starting_balance,
            months_count=months_count,
            **kwargs,
        )


def load_snapshot(payload: Mapping[str, Any], *, strict: bool = False) -> FinanceSnapshot:
    """
    Build a FinanceSnapshot from the persisted store payload.
    Accepts either the {"state": {...}} envelope or the bare state mapping.
    A missing startingMonth defaults to the current month, as the store does.
    """
    state = payload.get("state", payload)
    if not isinstance(state, Mapping):
        raise ValueError("Persisted payload has no state mapping.")

    starting_month = state.get("startingMonth") or current_month_key()
    return FinanceSnapshot(
        starting_month=str(starting_month),
        starting_balance=float(state.get("startingBalance", 0.0) or 0.0),
        transactions=tuple(load_transactions(state.get("transactions") or [], strict=strict)),
        categories=tuple(load_categories(state.get("categories"))),
    )


def load_snapshot_json(path: Union[str, Path], *, strict: bool = False) -> FinanceSnapshot:
    """Read a persisted store JSON file."""
    with open(path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)
    return load_snapshot(payload, strict=strict)
