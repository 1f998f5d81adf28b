"""Grid data structure for cellular automata."""

from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple
import numpy as np

from .cells import ECOSYSTEM_SYMBOLS, Cell, CellKind


class Grid:
    """Represents a bounded 2D grid of cells.

    Cell columns are stored by value in flat numpy arrays indexed by
    ``y * width + x``, so copying a grid never shares state with the
    original and a whole generation can be swapped in one assignment.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fill: Cell = Cell(),
        symbols: Optional[Mapping[CellKind, str]] = None,
    ) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            fill: Cell value every coordinate starts with
            symbols: Display characters per cell kind (ecosystem set by default)

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.symbols: Mapping[CellKind, str] = symbols or ECOSYSTEM_SYMBOLS
        size = width * height
        self._kinds = np.zeros(size, dtype=np.int8)
        self._ages = np.zeros(size, dtype=np.int32)
        self._hungers = np.zeros(size, dtype=np.int32)
        self._males = np.zeros(size, dtype=bool)
        if fill != Cell():
            self.fill(fill)

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def kinds(self) -> np.ndarray:
        """Cell kinds as a read-only (height, width) array."""
        view = self._kinds.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return y * self.width + x

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at a coordinate.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        i = self._index(x, y)
        return Cell(
            CellKind(int(self._kinds[i])),
            int(self._ages[i]),
            int(self._hungers[i]),
            bool(self._males[i]),
        )

    def kind_at(self, x: int, y: int) -> CellKind:
        """Get only the kind of the cell at a coordinate."""
        return CellKind(int(self._kinds[self._index(x, y)]))

    def symbol_at(self, x: int, y: int) -> str:
        """Display character of (x, y) in this grid's frame."""
        return self.symbols[self.kind_at(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store a cell value at a coordinate.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        i = self._index(x, y)
        self._kinds[i] = cell.kind
        self._ages[i] = cell.age
        self._hungers[i] = cell.hunger
        self._males[i] = cell.male

    def fill(self, cell: Cell) -> None:
        """Set every coordinate to the same cell value."""
        self._kinds.fill(cell.kind)
        self._ages.fill(cell.age)
        self._hungers.fill(cell.hunger)
        self._males.fill(cell.male)

    def clear(self) -> None:
        """Set every coordinate to Empty."""
        self.fill(Cell())

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def for_each_coordinate(self, fn: Callable[[int, int], None]) -> None:
        for x, y in self.coordinates():
            fn(x, y)

    def count(self, *kinds: CellKind) -> int:
        """Count cells whose kind is any of ``kinds``."""
        return int(np.isin(self._kinds, [int(k) for k in kinds]).sum())

    def census(self) -> Dict[CellKind, int]:
        """Number of cells of every kind."""
        counts = np.bincount(self._kinds, minlength=len(CellKind))
        return {kind: int(counts[kind]) for kind in CellKind}

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height, symbols=self.symbols)
        clone._kinds[:] = self._kinds
        clone._ages[:] = self._ages
        clone._hungers[:] = self._hungers
        clone._males[:] = self._males
        return clone

    def state_key(self) -> bytes:
        """Bytes identifying the full grid state, usable as a dict key."""
        return b"".join(
            a.tobytes() for a in (self._kinds, self._ages, self._hungers, self._males)
        )

    def render(self) -> str:
        """Frame text: one symbol per cell, newline after every row."""
        return "".join(line + "\n" for line in self._lines())

    def _lines(self) -> Iterator[str]:
        lookup = self.symbols
        for row in self.kinds:
            yield "".join(lookup[CellKind(int(k))] for k in row)

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same cells."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and self.state_key() == other.state_key()

    def __str__(self) -> str:
        return "\n".join(self._lines())
