"""
Geometry Values

Plain rectangle and point types shared by the layout tree and the driver.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Position:
    """Position in logical coordinate space."""

    x: int = 0
    y: int = 0


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def shrink(self, amount: int) -> "Area":
        """Inset the area by amount on every side."""
        return Area(
            self.x + amount,
            self.y + amount,
            self.width - 2 * amount,
            self.height - 2 * amount,
        )

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def has_positive_size(self) -> bool:
        return self.width > 0 and self.height > 0
