"""
Numeric utilities
bdscore/scoring/utils.py

Small float helpers shared by the scoring modules.
"""

from decimal import Decimal, ROUND_HALF_UP


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_half_up(value: float, places: int = 4) -> float:
    """Round for display using half-up rounding rather than banker's rounding."""
    return float(to_decimal(value, places))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    numerator / denominator with zero-division protection.

    Returns `default` when the denominator is exactly zero.
    """
    if denominator == 0:
        return default
    return numerator / denominator
