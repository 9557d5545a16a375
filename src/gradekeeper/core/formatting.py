from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = "-"
PREVIEW_PLACEHOLDER = "--"


def round_half_up(value: float, places: int) -> str:
    """Fixed-point text of value, rounding ties away from zero."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def format_score(value: float) -> str:
    return round_half_up(value, 1)


def format_whole(value: float) -> str:
    return round_half_up(value, 0)


def format_percent(rate: float) -> str:
    return f"{format_whole(rate * 100)}%"


def format_optional_score(value: float | None, placeholder: str = PLACEHOLDER) -> str:
    return placeholder if value is None else format_score(value)


def format_optional_whole(value: float | None, placeholder: str = PLACEHOLDER) -> str:
    return placeholder if value is None else format_whole(value)
