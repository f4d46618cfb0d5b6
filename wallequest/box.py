"""Axis-aligned boxes with the collision tests the game relies on."""

from __future__ import annotations


class Box:
    """A rectangle given by its centre and its size."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 1.0,
        height: float = 1.0,
    ) -> None:
        self.pos_x = x
        self.pos_y = y
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.pos_x!r}, y={self.pos_y!r}, "
            f"width={self.width!r}, height={self.height!r})"
        )

    def intersect(self, other: Box) -> bool:
        """Return True if this box overlaps ``other``."""
        return (
            abs(self.pos_x - other.pos_x) * 2.0 < self.width + other.width
            and abs(self.pos_y - other.pos_y) * 2.0 < self.height + other.height
        )

    def intersect_down(self, other: Box) -> float:
        """Vertical offset that lifts this box off ``other`` when resting on it.

        Returns 0.0 when the boxes do not collide with this box above.
        """
        if (
            abs(self.pos_x - other.pos_x) * 2.0 >= self.width + other.width
            or self.pos_y > other.pos_y
        ):
            return 0.0
        return min(
            0.0,
            other.pos_y - other.height / 2.0 - self.pos_y - self.height / 2.0,
        )

    def intersect_sideways(self, other: Box) -> float:
        """Horizontal offset that pushes this box out of ``other``.

        Returns 0.0 when there is no sideways collision. The vertical
        proximity check compares against the widths of the two boxes.
        """
        if abs(self.pos_y - other.pos_y) * 2.0 >= self.width + other.width:
            return 0.0
        if self.pos_x > other.pos_x:
            return max(
                0.0,
                other.pos_x + other.width / 2.0 - self.pos_x + self.width / 2.0,
            )
        return min(
            0.0,
            other.pos_x - other.width / 2.0 - self.pos_x - self.width / 2.0,
        )