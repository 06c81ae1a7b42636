"""Mapping between board coordinates and pixel positions."""

from __future__ import annotations

from typing import Union

from navalbattle.coord import Coord

Size = tuple[int, int]


class Renderer:
    """Holds the size of one board square and converts positions."""

    def __init__(self) -> None:
        self.size: Size = (0, 0)

    def resize(self, size: Union[int, Size]) -> None:
        """Set the square size; a single number means a square."""
        self.size = (size, size) if isinstance(size, int) else (size[0], size[1])

    def to_logical(self, point: tuple[float, float]) -> Coord:
        """Board square containing a pixel position."""
        width, height = self.size
        return Coord(int(point[0] / width), int(point[1] / height))

    def to_real(self, coord: Coord) -> tuple[float, float]:
        """Pixel position of a square's top-left corner."""
        width, height = self.size
        return float(coord.x * width), float(coord.y * height)