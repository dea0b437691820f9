"""
ui/bottom_pane/geometry.py
Rectangles and the cell buffer that bottom-pane views render into.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from rich.segment import Segment
from rich.style import Style


@dataclass(frozen=True)
class Rect:
    """A screen region in cells. All fields are non-negative."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int = 1) -> "Rect":
        """Shrink by `margin` on every side, never below zero size."""
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )

    def intersection(self, other: "Rect") -> "Rect":
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def split_vertical(self, top_height: int) -> Tuple["Rect", "Rect"]:
        """Split into a top rect of `top_height` rows and the rest below it."""
        top_height = min(max(0, top_height), self.height)
        top = Rect(self.x, self.y, self.width, top_height)
        rest = Rect(self.x, self.y + top_height, self.width, self.height - top_height)
        return top, rest


@dataclass
class Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style.null)


class Buffer:
    """
    Mutable grid of cells covering `area`.
    Coordinates are absolute; anything written outside `area` is dropped.
    Every character takes exactly one cell.
    """

    def __init__(self, area: Rect):
        self.area = area
        self._cells: List[Cell] = [Cell() for _ in range(area.area)]

    @classmethod
    def empty(cls, width: int, height: int) -> "Buffer":
        return cls(Rect(0, 0, max(0, width), max(0, height)))

    def _index(self, x: int, y: int) -> Optional[int]:
        if not (self.area.x <= x < self.area.right and self.area.y <= y < self.area.bottom):
            return None
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"({x}, {y}) is outside {self.area}")
        return self._cells[index]

    def reset(self) -> None:
        for cell in self._cells:
            cell.symbol = " "
            cell.style = Style.null()

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        max_width: Optional[int] = None,
    ) -> int:
        """Write `text` left to right from (x, y). Returns the next free column."""
        if max_width is not None:
            text = text[: max(0, max_width)]
        style = style or Style.null()
        for char in text:
            index = self._index(x, y)
            if index is not None and char not in "\r\n":
                cell = self._cells[index]
                cell.symbol = char
                cell.style = style
            x += 1
        return x

    def set_segments(
        self, x: int, y: int, segments: Iterable[Segment], max_width: int
    ) -> int:
        """Write rich segments on one row, at most `max_width` cells wide."""
        remaining = max(0, max_width)
        for segment in segments:
            if remaining == 0:
                break
            if segment.control:
                continue
            text = segment.text[:remaining]
            x = self.set_string(x, y, text, segment.style)
            remaining -= len(text)
        return x

    def row_text(self, y: int) -> str:
        """Plain symbols of one row, mostly useful for assertions."""
        if not self.area.y <= y < self.area.bottom:
            raise IndexError(f"row {y} is outside {self.area}")
        start = (y - self.area.y) * self.area.width
        return "".join(cell.symbol for cell in self._cells[start : start + self.area.width])

    def lines(self) -> List[str]:
        return [self.row_text(y) for y in range(self.area.y, self.area.bottom)]

    def row_segments(self, y: int) -> List[Segment]:
        """One row as rich segments, with runs of equal style merged."""
        segments: List[Segment] = []
        run: List[str] = []
        run_style: Optional[Style] = None
        for x in range(self.area.x, self.area.right):
            cell = self.get(x, y)
            if run and cell.style != run_style:
                segments.append(Segment("".join(run), run_style))
                run = []
            run.append(cell.symbol)
            run_style = cell.style
        if run:
            segments.append(Segment("".join(run), run_style))
        return segments
