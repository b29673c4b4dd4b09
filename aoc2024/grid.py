"""Grid coordinates and small integer helpers shared by the puzzles."""

from __future__ import annotations

from dataclasses import dataclass


def sign(a: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``a``."""
    return (a > 0) - (a < 0)


def char_to_int(char: str) -> int:
    """Return the value of a single decimal digit character."""
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    raise ValueError(f"not a decimal digit: {char!r}")


@dataclass(frozen=True, order=True)
class Vertex:
    """A point or a translation on an integer grid."""

    x: int
    y: int

    def __add__(self, other: Vertex) -> Vertex:
        if not isinstance(other, Vertex):
            return NotImplemented
        return Vertex(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Vertex:
        return Vertex(-self.x, -self.y)

    def delta_to(self, other: Vertex) -> Vertex:
        """Translation that moves this vertex onto ``other``."""
        return Vertex(other.x - self.x, other.y - self.y)

    def sign(self) -> Vertex:
        """Vertex with each coordinate replaced by its sign."""
        return Vertex(sign(self.x), sign(self.y))

    def diff(self) -> int:
        """Difference ``y - x`` between the two coordinates."""
        return self.y - self.x

    def rotate_right(self) -> Vertex:
        """Rotate a direction a quarter turn clockwise (y grows downwards)."""
        return Vertex(-self.y, self.x)

    def rotate_left(self) -> Vertex:
        """Rotate a direction a quarter turn counter-clockwise."""
        return Vertex(self.y, -self.x)