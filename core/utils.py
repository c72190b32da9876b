from __future__ import annotations

import re
from datetime import date
from functools import lru_cache
from typing import List, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

_MONTH_KEY_RE = re.compile(r"([0-9]{4})-([0-9]{2})")


@lru_cache(maxsize=4096)
def _parse_month_key(key: str) -> Optional[int]:
    m = _MONTH_KEY_RE.fullmatch(key)
    if m is None:
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return year * 12 + (month - 1)


def month_index(key) -> Optional[int]:
    """
    Absolute month number (year * 12 + month - 1) for a "YYYY-MM" key.
    Returns None for anything that is not a well-formed key, including None.
    """
    if not isinstance(key, str):
        return None
    return _parse_month_key(key)


def month_key(index: int) -> str:
    """Inverse of month_index()."""
    year, month0 = divmod(int(index), 12)
    return f"{year:04d}-{month0 + 1:02d}"


def month_of_year(key) -> Optional[int]:
    """Calendar month (1-12) of a month key, None if malformed."""
    idx = month_index(key)
    if idx is None:
        return None
    return idx % 12 + 1


def _require_month_key(key) -> int:
    idx = month_index(key)
    if idx is None:
        raise ValueError(f"Invalid month key: {key!r}. Expected YYYY-MM")
    return idx


def add_months(key: str, n: int) -> str:
    """Shift a month key by n calendar months (n may be negative)."""
    idx = _require_month_key(key)
    first = date(idx // 12, idx % 12 + 1, 1)
    return (first + relativedelta(months=n)).strftime("%Y-%m")


def month_keys(starting_month: str, n_months: int) -> List[str]:
    """
    Consecutive month keys for a projection horizon, starting at starting_month.
    A non-positive n_months gives an empty horizon.
    """
    _require_month_key(starting_month)
    if n_months <= 0:
        return []
    periods = pd.period_range(start=pd.Period(starting_month, freq="M"), periods=n_months, freq="M")
    return [p.strftime("%Y-%m") for p in periods]


def current_month_key(today: Optional[date] = None) -> str:
    """Month key for today's date (wall clock). Callers only; the engine never uses it."""
    ts = pd.Timestamp(today) if today is not None else pd.Timestamp.today()
    return ts.strftime("%Y-%m")
