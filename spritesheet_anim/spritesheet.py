"""Helpers that turn spritesheet layout queries into frame indices."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class URect:
    """An axis-aligned rectangle with unsigned integer corners."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass
class TextureAtlasLayout:
    """The size of a texture atlas and the rectangle of each of its frames."""

    size: tuple[int, int]
    textures: list[URect] = field(default_factory=list)

    @classmethod
    def from_grid(
        cls, tile_width: int, tile_height: int, columns: int, rows: int
    ) -> TextureAtlasLayout:
        """Build a layout of ``columns`` x ``rows`` equal tiles, row by row."""
        textures = [
            URect(
                column * tile_width,
                row * tile_height,
                (column + 1) * tile_width,
                (row + 1) * tile_height,
            )
            for row in range(rows)
            for column in range(columns)
        ]
        return cls(size=(tile_width * columns, tile_height * rows), textures=textures)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Spritesheet:
    """A grid of frames with a number of columns and rows."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError("columns and rows must not be negative")

    @property
    def _size(self) -> int:
        return self.columns * self.rows

    def _warn_exceeds(self, what: str) -> None:
        _log.warning(
            "%s exceeds the spritesheet size (%d, %d)", what, self.columns, self.rows
        )

    def all(self) -> list[int]:
        """Return the indices of every frame of the spritesheet."""
        return list(range(self._size))

    def positions(self, positions: Iterable[tuple[int, int]]) -> list[int]:
        """Return the indices at the given (x, y) positions, skipping those outside."""
        indices = []
        for x, y in positions:
            index = y * self.columns + x
            if index >= self._size:
                self._warn_exceeds(f"position ({x}, {y})")
            else:
                indices.append(index)
        return indices

    def row(self, row: int) -> list[int]:
        """Return the indices of a whole row."""
        if row >= self.rows:
            self._warn_exceeds(f"row {row}")
            return []
        first = row * self.columns
        return list(range(first, first + self.columns))

    def row_partial(
        self,
        row: int,
        start: int | None = None,
        end: int | None = None,
        inclusive: bool = False,
    ) -> list[int]:
        """Return the indices of a column range within a row.

        ``start`` defaults to the first column and ``end`` to past the last
        one; ``inclusive`` makes ``end`` part of the range.
        """
        if row >= self.rows:
            self._warn_exceeds(f"row {row}")
            return []
        first_column = 0 if start is None else start
        if end is None:
            end_column = self.columns
        else:
            end_column = end + 1 if inclusive else end
        if first_column >= self.columns or end_column > self.columns:
            self._warn_exceeds(f"range ({start}, {end})")
        base = row * self.columns
        first_index = base + _clamp(first_column, 0, max(self.columns - 1, 0))
        end_index = base + _clamp(end_column, 0, self.columns)
        return list(range(first_index, end_index))

    def column(self, column: int) -> list[int]:
        """Return the indices of a whole column."""
        if column >= self.columns:
            self._warn_exceeds(f"column {column}")
            return []
        return [column + row * self.columns for row in range(self.rows)]

    def column_partial(
        self,
        column: int,
        start: int | None = None,
        end: int | None = None,
        inclusive: bool = False,
    ) -> list[int]:
        """Return the indices of a row range within a column.

        ``start`` defaults to the first row and ``end`` to past the last one;
        ``inclusive`` makes ``end`` part of the range.
        """
        if column >= self.columns:
            self._warn_exceeds(f"column {column}")
            return []
        first_row = 0 if start is None else start
        if end is None:
            end_row = self.rows
        else:
            end_row = end + 1 if inclusive else end
        if first_row >= self.rows or end_row > self.rows:
            self._warn_exceeds(f"range ({start}, {end})")
        first_row = _clamp(first_row, 0, max(self.rows - 1, 0))
        end_row = _clamp(end_row, 0, self.rows)
        return [row * self.columns + column for row in range(first_row, end_row)]

    def horizontal_strip(self, x: int, y: int, count: int) -> list[int]:
        """Return ``count`` indices from (x, y), wrapping from row to row."""
        first_index = y * self.columns + x
        last_index = min(first_index + count, self._size)
        frames = list(range(first_index, last_index))
        if last_index != first_index + count:
            self._warn_exceeds(f"horizontal strip from {x}/{y} with {count} entries")
        return frames

    def vertical_strip(self, x: int, y: int, count: int) -> list[int]:
        """Return ``count`` indices from (x, y), wrapping from column to column."""
        available = max((self.columns - (x + 1)) * self.rows + self.rows - y, 0)
        clamped = min(count, available)
        frames = [
            ((y + i) % self.rows) * self.columns + x + (y + i) // self.rows
            for i in range(clamped)
        ]
        if clamped != count:
            self._warn_exceeds(f"vertical strip from {x}/{y} with {count} entries")
        return frames

    def atlas_layout(self, frame_width: int, frame_height: int) -> TextureAtlasLayout:
        """Create the texture atlas layout matching this spritesheet."""
        return TextureAtlasLayout.from_grid(
            frame_width, frame_height, self.columns, self.rows
        )