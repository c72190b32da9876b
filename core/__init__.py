"""
Core package — domain types, configuration, and month-key utilities.
No business logic lives here.
"""

from .schema import (
    DEFAULT_CATEGORIES,
    Category,
    Direction,
    MonthData,
    MonthDetails,
    Recurrence,
    Transaction,
)
from .config import ProjectionConfig
from .utils import (
    add_months,
    current_month_key,
    month_index,
    month_key,
    month_keys,
    month_of_year,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "Direction",
    "MonthData",
    "MonthDetails",
    "Recurrence",
    "Transaction",
    "ProjectionConfig",
    "add_months",
    "current_month_key",
    "month_index",
    "month_key",
    "month_keys",
    "month_of_year",
]
