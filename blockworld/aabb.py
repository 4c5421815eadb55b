"""Axis-aligned bounding boxes."""

from __future__ import annotations

Vector3 = tuple[float, float, float]


class AABB:
    """Axis-aligned box; all comparisons are strict."""

    def __init__(
        self,
        minimum: Vector3 = (0.0, 0.0, 0.0),
        maximum: Vector3 = (0.0, 0.0, 0.0),
    ) -> None:
        self.minimum = tuple(minimum)
        self.maximum = tuple(maximum)

    def intersects(self, other: AABB) -> bool:
        """True when the interiors of both boxes overlap."""
        return all(
            other.maximum[axis] > self.minimum[axis]
            and other.minimum[axis] < self.maximum[axis]
            for axis in range(3)
        )

    def contains_point(self, point: Vector3) -> bool:
        """True when ``point`` lies strictly inside the box."""
        return all(
            self.minimum[axis] < point[axis] < self.maximum[axis] for axis in range(3)
        )

    def offset(self, delta: Vector3) -> None:
        """Move the box by ``delta`` in place."""
        self.minimum = tuple(a + d for a, d in zip(self.minimum, delta))
        self.maximum = tuple(a + d for a, d in zip(self.maximum, delta))

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"