import pytest

from core.schema import Direction, Recurrence, Transaction


@pytest.fixture
def make_txn():
    """Factory for transactions with sensible defaults."""
    counter = {"n": 0}

    def _make(
        amount=100.0,
        direction=Direction.EXPENSE,
        recurrence=Recurrence.NONE,
        *,
        month=None,
        start_month=None,
        end_month=None,
        category_id="cat-misc",
        label="Item",
        id=None,
    ):
        counter["n"] += 1
        return Transaction(
            id=id or f"t{counter['n']}",
            label=label,
            category_id=category_id,
            amount=amount,
            direction=direction,
            recurrence=recurrence,
            month=month,
            start_month=start_month,
            end_month=end_month,
        )

    return _make


@pytest.fixture
def household(make_txn):
    """A small realistic catalog mixing all three recurrence models."""
    return [
        make_txn(2500, Direction.INCOME, Recurrence.MONTHLY, start_month="2026-01",
                 category_id="cat-salary", label="Salary"),
        make_txn(900, Direction.EXPENSE, Recurrence.MONTHLY, start_month="2025-09",
                 category_id="cat-rent", label="Rent"),
        make_txn(300, Direction.EXPENSE, Recurrence.MONTHLY, start_month="2026-01",
                 end_month="2026-06", category_id="cat-transport", label="Car lease"),
        make_txn(1200, Direction.EXPENSE, Recurrence.YEARLY, start_month="2025-05",
                 category_id="cat-rent", label="Home insurance"),
        make_txn(800, Direction.INCOME, Recurrence.NONE, month="2026-04",
                 category_id="cat-dividend", label="Dividend"),
        make_txn(1500, Direction.EXPENSE, Recurrence.NONE, month="2026-08",
                 category_id="cat-food", label="Wedding dinner"),
    ]
