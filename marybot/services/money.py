from __future__ import annotations

from decimal import Decimal, ROUND_DOWN
from random import Random


def coins(value: float | int | str | Decimal) -> int:
    """Whole coins, truncated toward zero."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_DOWN))


def fraction_of(balance: int, low: float, high: float, rng: Random) -> int:
    """Truncated share of a balance, with the fraction drawn from [low, high)."""
    base = Decimal(max(0, int(balance)))
    low_d = Decimal(str(low))
    span = Decimal(str(high)) - low_d
    fraction = low_d + Decimal(str(rng.random())) * span
    return coins(base * fraction)


def roll_coins(low: int, high: int, rng: Random) -> int:
    """Whole number of coins in [low, high], both ends included."""
    span = int(high) - int(low) + 1
    return int(low) + min(span - 1, int(rng.random() * span))
