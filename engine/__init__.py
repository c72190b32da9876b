"""
Cash-flow projection engine — applicability rules, monthly aggregation, frame views.
"""

from .applicability import is_well_formed, transaction_applies
from .frames import category_totals_frame, projection_to_frame
from .projection import calculate_projection, run_projection

__all__ = [
    "calculate_projection",
    "run_projection",
    "transaction_applies",
    "is_well_formed",
    "projection_to_frame",
    "category_totals_frame",
]
