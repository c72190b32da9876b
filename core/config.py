"""
Projection configuration.
The engine itself takes plain arguments; this is the bundle the store keeps
alongside its transactions and hands to engine.run_projection().
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionConfig:
    starting_month: str  # "YYYY-MM"
    starting_balance: float = 0.0
    months_count: int = 12

    # alternate current-month policy: drop recurring items from step 0
    exclude_recurring_in_first_month: bool = False
