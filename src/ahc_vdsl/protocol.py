"""Token formatting helpers for the visualizer line protocol."""

from __future__ import annotations

from decimal import Decimal
import math
from typing import Optional

from ahc_vdsl.shapes import ItemBounds

EMPTY_TOKEN = '""'


def format_number(value: float) -> str:
    """Render a number the way the visualizer expects it.

    Integral values drop the fractional part, everything else uses the
    shortest round-trip form without exponent notation.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        if text == "0" and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def quote_token(text: str) -> str:
    """Wrap text in double quotes when it would not survive tokenizing.

    Line breaks become spaces so a label never splits a protocol line.
    Embedded double quotes are passed through unescaped; callers should
    keep them out of labels and titles.
    """
    text = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    if not text or any(ch.isspace() for ch in text):
        return f'"{text}"'
    return text


def header(mode: str, keyword: str, bounds: Optional[ItemBounds] = None) -> str:
    """Return the ``$v(<mode>) KEYWORD`` prefix, with bounds when present."""
    if bounds is None:
        return f"$v({mode}) {keyword}"
    return (
        f"$v({mode}) {keyword}("
        f"{format_number(bounds.left)}, {format_number(bounds.top)}, "
        f"{format_number(bounds.right)}, {format_number(bounds.bottom)})"
    )


def join_tokens(*tokens: object) -> str:
    """Join tokens with single spaces, formatting numbers on the way."""
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, (int, float)):
            parts.append(format_number(token))
        else:
            parts.append(str(token))
    return " ".join(parts)
