"""
KPI outputs — dashboard metrics and category breakdowns computed from a projection.
"""

from .metrics import ProjectionKPIs, compute_projection_kpis
from .aggregator import summarize_categories

__all__ = [
    "ProjectionKPIs",
    "compute_projection_kpis",
    "summarize_categories",
]
