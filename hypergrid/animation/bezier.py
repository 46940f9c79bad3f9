"""
Bezier Easing

Cubic bezier easing curves defined by two control points, with the curve's
end points fixed at (0, 0) and (1, 1).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

NEWTON_ITERATIONS = 8
NEWTON_EPSILON = 0.0001


@dataclass(frozen=True)
class BezierCurve:
    """Easing curve mapping normalized time to normalized progress.

    Control point values outside [0, 1] are allowed and produce overshoot
    ("bouncy") curves.
    """

    p1x: float = 0.0
    p1y: float = 0.0
    p2x: float = 1.0
    p2y: float = 1.0

    @classmethod
    def from_points(cls, points: Sequence[float]) -> "BezierCurve":
        """Build a curve from a (p1x, p1y, p2x, p2y) quadruple."""
        p1x, p1y, p2x, p2y = points
        return cls(float(p1x), float(p1y), float(p2x), float(p2y))

    def evaluate(self, x: float) -> float:
        """
        Get the eased progress for a normalized time value.

        Args:
            x: Normalized time, clamped to [0, 1]

        Returns:
            Eased progress (may leave [0, 1] for overshoot curves)
        """
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0

        return self._compute_y(self._find_t_for_x(x))

    def _compute_x(self, t: float) -> float:
        mt = 1.0 - t
        return 3.0 * mt * mt * t * self.p1x + 3.0 * mt * t * t * self.p2x + t * t * t

    def _compute_y(self, t: float) -> float:
        mt = 1.0 - t
        return 3.0 * mt * mt * t * self.p1y + 3.0 * mt * t * t * self.p2y + t * t * t

    def _find_t_for_x(self, x: float) -> float:
        # Newton-Raphson; an unconverged result is accepted as approximate
        t = x
        for _ in range(NEWTON_ITERATIONS):
            dx = self._compute_x(t) - x
            if abs(dx) < NEWTON_EPSILON:
                break

            mt = 1.0 - t
            derivative = (
                3.0 * mt * mt * self.p1x
                + 6.0 * mt * t * (self.p2x - self.p1x)
                + 3.0 * t * t * (1.0 - self.p2x)
            )
            if abs(derivative) < NEWTON_EPSILON:
                break

            t -= dx / derivative
            t = min(max(t, 0.0), 1.0)
        return t


LINEAR = BezierCurve()
