"""Axis-aligned rectangular bounds."""

from dataclasses import dataclass


@dataclass
class Bounds:
    """A rectangle given by its top-left and bottom-right corners."""

    start: tuple[float, float]
    end: tuple[float, float]

    def contains_point(self, point) -> bool:
        """Return True if the point lies inside or on the edge."""
        return (
            self.start[0] <= point[0] <= self.end[0]
            and self.start[1] <= point[1] <= self.end[1]
        )

    def collides_with(self, other: "Bounds") -> bool:
        """Loose collision check between two boxes."""
        return (self.start[0] <= other.end[0] or self.end[0] >= other.start[0]) and (
            self.start[1] <= other.end[1] or self.end[1] >= other.start[1]
        )

    def contains_box(self, other: "Bounds") -> bool:
        """Loose containment check of another box."""
        return (self.start[0] <= other.start[0] or self.end[0] >= other.end[0]) and (
            self.start[1] <= other.start[1] or self.end[1] >= other.end[1]
        )


def get_bounds(pos, size) -> Bounds:
    """Build bounds from a position and a size."""
    return Bounds((pos[0], pos[1]), (pos[0] + size[0], pos[1] + size[1]))