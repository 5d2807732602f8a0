"""Unit conversion and display rounding helpers"""
from decimal import Decimal, ROUND_HALF_UP

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000

def round_half_up(value: float, places: int = 0) -> float:
    """Round the exact value of a float, halves away from zero"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

def ms_to_hours(ms: int, places: int = 2) -> float:
    return round_half_up(ms / MS_PER_HOUR, places)

def ms_to_minutes(ms: int, places: int = 2) -> float:
    return round_half_up(ms / MS_PER_MINUTE, places)
