"""RGB color value used by every drawable."""

from __future__ import annotations

from dataclasses import dataclass
import re

_HEX_PAIR = re.compile(r"^[0-9A-Fa-f]{2}$")


def _parse_component(text: str) -> int:
    if not _HEX_PAIR.match(text):
        return 0
    return int(text, 16)


@dataclass(frozen=True)
class Color:
    """Immutable tri-byte RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"color component {name} must be an int: {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"color component {name} out of range: {value}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#RRGGBB`` or ``RRGGBB``; malformed components become 0."""
        if text.startswith("#"):
            text = text[1:]
        return cls(
            _parse_component(text[0:2]),
            _parse_component(text[2:4]),
            _parse_component(text[4:6]),
        )

    def to_hex_string(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex_string()


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
GRAY = Color(128, 128, 128)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
GREEN = Color(0, 255, 0)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
