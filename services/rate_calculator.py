# Rate Calculator — stay pricing
# total = base_rate × nights × multiplier, kept at full precision.
# Bad inputs are coerced to safe values, never rejected.

import math
from datetime import date, datetime
from typing import Optional, Union
from config import DEFAULT_BASE_RATE

DateLike = Union[str, date, datetime, None]


def _as_number(value) -> Optional[float]:
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def stay_nights(duration_nights) -> int:
    """Nights as a whole number: not a number or < 1 → 1, fractions round up."""
    n = _as_number(duration_nights)
    if n is None or n < 1:
        return 1
    return int(math.ceil(n))


def valid_base_rate(base_rate, override=None) -> float:
    """Pick the listing's effective nightly rate: override, then base, then default."""
    for candidate in (override, base_rate):
        n = _as_number(candidate)
        if n is not None and n > 0:
            return n
    return DEFAULT_BASE_RATE


def compute_total(base_rate, duration_nights, multiplier) -> float:
    """
    Total price for a stay.
      - nights < 1 (or not a number) → 1, fractional nights round up
      - base rate not finite or ≤ 0   → DEFAULT_BASE_RATE
      - multiplier not finite or ≤ 0  → 1.0
    """
    rate = valid_base_rate(base_rate)
    mult = _as_number(multiplier)
    if mult is None or mult <= 0:
        mult = 1.0
    return rate * stay_nights(duration_nights) * mult


def display_total(total: float) -> float:
    return round(total, 2)


def _parse_date(value: DateLike) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def stay_duration(from_date: DateLike, to_date: DateLike) -> int:
    """Nights between two dates, rounded up, never below 1. Missing dates → 1."""
    start = _parse_date(from_date)
    end   = _parse_date(to_date)
    if start is None or end is None:
        return 1
    # Mixed naive/aware inputs compare on wall-clock time
    if (start.tzinfo is None) != (end.tzinfo is None):
        start, end = start.replace(tzinfo=None), end.replace(tzinfo=None)
    days = (end - start).total_seconds() / 86400
    return max(1, int(math.ceil(days)))


def multiplier_label(multiplier: float) -> str:
    """'Base rate', '+20%' or '-10%' relative to the base rate."""
    percent = round((multiplier - 1) * 100)
    if percent == 0:
        return "Base rate"
    if percent > 0:
        return f"+{percent}%"
    return f"-{-percent}%"
