"""Player color values parsed from ``#rrggbb`` strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with channels in ``0..1``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_hex(self) -> str:
        return "#" + "".join(f"{round(channel * 255):02x}" for channel in (self.r, self.g, self.b))


def color_from_hex(value: str) -> Color:
    """Parse ``#rrggbb`` (or ``#rrggbbaa``) into a :class:`Color`.

    Examples:
        >>> color_from_hex("#010203").g == 2 / 255
        True

    Raises:
        ParseError: If ``value`` is not a hex color.
    """
    match = _HEX_COLOR.match(value.strip())
    if not match:
        raise ParseError(f"Invalid hex color: '{value}'. Expected format: #rrggbb")

    channels = [int(group, 16) / 255 for group in match.groups() if group is not None]
    return Color(*channels)
