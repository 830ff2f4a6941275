"""Dense two-dimensional array stored row-major in a flat list."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_ROW_ERROR = "Row index out of bounds"
_COL_ERROR = "Column index out of bounds"


def _blank_like(value: Any) -> Any:
    try:
        return type(value)()
    except TypeError:
        return value


class Vector2D(Generic[T]):
    """A rows x cols grid with bounds-checked access.

    ``grid[i, j]`` reads or writes one element; ``grid[i]`` returns a view of
    row ``i``. Negative indices are out of bounds.
    """

    def __init__(self, rows: int = 0, cols: int = 0, value: T = 0) -> None:
        self._rows = rows
        self._cols = cols
        self._blank = _blank_like(value)
        self._data: list[T] = [value] * (rows * cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape, keeping the flat storage and padding with blanks."""
        self._rows = rows
        self._cols = cols
        size = rows * cols
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend([self._blank] * (size - len(self._data)))

    def clear(self) -> None:
        """Drop all elements and make the shape 0 x 0."""
        self._rows = self._cols = 0
        self._data.clear()

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self._rows:
            raise IndexError(_ROW_ERROR)

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self._cols:
            raise IndexError(_COL_ERROR)

    def _index(self, i: int, j: int) -> int:
        self._check_row(i)
        self._check_col(j)
        return i * self._cols + j

    def row(self, i: int) -> RowView[T]:
        """Return a view of row ``i``."""
        self._check_row(i)
        return RowView(self, i)

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            return self._data[self._index(i, j)]
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        if not isinstance(key, tuple):
            raise TypeError("assignment needs a (row, column) index")
        i, j = key
        self._data[self._index(i, j)] = value

    def __iter__(self) -> Iterator[RowView[T]]:
        return (RowView(self, i) for i in range(self._rows))

    def __len__(self) -> int:
        return self._rows


class RowView(Generic[T]):
    """A live view of one row of a :class:`Vector2D`."""

    __slots__ = ("_grid", "_row")

    def __init__(self, grid: Vector2D[T], row: int) -> None:
        self._grid = grid
        self._row = row

    def __getitem__(self, j: int) -> T:
        return self._grid[self._row, j]

    def __setitem__(self, j: int, value: T) -> None:
        self._grid[self._row, j] = value

    def __len__(self) -> int:
        return self._grid.cols

    def __iter__(self) -> Iterator[T]:
        return (self[j] for j in range(len(self)))