import math
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float) -> int:
    """0.5는 항상 올림 (Python 기본 round는 짝수 반올림)"""
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """소수 1자리 반올림, .x5는 항상 올림 (예: 81.25 → 81.3)"""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
