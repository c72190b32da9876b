"""
Data preparation — loading persisted store records, signed-amount normalization, validation.
"""

from .loader import (
    FinanceSnapshot,
    load_categories,
    load_snapshot,
    load_snapshot_json,
    load_transactions,
    split_signed_amount,
)
from .validators import ValidationResult, validate_transactions

__all__ = [
    "FinanceSnapshot",
    "load_categories",
    "load_snapshot",
    "load_snapshot_json",
    "load_transactions",
    "split_signed_amount",
    "ValidationResult",
    "validate_transactions",
]
