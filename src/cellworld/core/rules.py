"""Per-cell update rules for the ecosystem and the Game of Life."""

from typing import Callable, Dict, Optional
import numpy as np

from .cells import ALIVE, EMPTY, GRASS, MINERAL, CellKind
from .config import FIRST_COME, LAST_WRITER_WINS, EcosystemConfig
from .grid import Grid
from .neighborhood import count_all_alive_neighbors, count_alive_neighbors, random_move


class TickBuffer:
    """The next-generation grid being written during one step.

    With ``last-writer-wins`` every write lands, so a cell written later in
    row-major order replaces an earlier write to the same coordinate. With
    ``first-come`` the first write to a coordinate is kept and later writes
    to it are dropped.
    """

    def __init__(self, current: Grid, collision: str = LAST_WRITER_WINS) -> None:
        self.grid = Grid(current.width, current.height, symbols=current.symbols)
        self.first_come = collision == FIRST_COME
        self._written = np.zeros(current.width * current.height, dtype=bool)

    def taken(self, x: int, y: int) -> bool:
        """Whether a write to (x, y) would be dropped."""
        return self.first_come and bool(self._written[y * self.grid.width + x])

    def write(self, x: int, y: int, cell) -> bool:
        """Write a cell into the next grid.

        Returns:
            True if the write landed
        """
        if self.taken(x, y):
            return False
        self.grid.set(x, y, cell)
        self._written[y * self.grid.width + x] = True
        return True


class Rules:
    """Base class for a rule set applied cell by cell."""

    name = "rules"

    def __init__(self) -> None:
        self._handlers: Dict[CellKind, Callable[[Grid, int, int, TickBuffer], None]] = {}

    def begin_step(self, grid: Grid) -> None:
        """Hook called once per step before any cell is updated."""

    def update_cell(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        """Compute the next state of (x, y) from ``grid`` and write it to ``out``.

        Raises:
            ValueError: If the cell kind is not part of this rule set
        """
        kind = grid.kind_at(x, y)
        handler = self._handlers.get(kind)
        if handler is None:
            raise ValueError(f"{kind.name} cells are not supported by {self.name} rules")
        handler(grid, x, y, out)


class EcosystemRules(Rules):
    """Sheep eat grass, wolves eat sheep, the dead return as minerals.

    Per cell kind:
    - Sheep/Wolf: age and hunger grow by one; past either limit the animal
      becomes Mineral. Otherwise it tries one random step: onto prey it eats
      (hunger back to 0), onto Empty it moves, anywhere else it stays.
    - Grass stays Grass, Mineral regrows as Grass, Empty stays Empty.
    """

    name = "ecosystem"

    def __init__(self, rng, config: Optional[EcosystemConfig] = None) -> None:
        super().__init__()
        self.rng = rng
        self.config = config or EcosystemConfig()
        self._handlers = {
            CellKind.SHEEP: self._update_sheep,
            CellKind.WOLF: self._update_wolf,
            CellKind.GRASS: self._keep_grass,
            CellKind.MINERAL: self._regrow,
            CellKind.EMPTY: self._keep_empty,
        }

    def _update_sheep(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        cfg = self.config
        self._update_animal(grid, x, y, out, cfg.sheep_max_age, cfg.sheep_max_hunger, CellKind.GRASS)

    def _update_wolf(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        cfg = self.config
        self._update_animal(grid, x, y, out, cfg.wolf_max_age, cfg.wolf_max_hunger, CellKind.SHEEP)

    def _update_animal(
        self,
        grid: Grid,
        x: int,
        y: int,
        out: TickBuffer,
        max_age: int,
        max_hunger: int,
        prey: CellKind,
    ) -> None:
        # Already eaten this tick
        if out.taken(x, y):
            return

        animal = grid.get(x, y).aged()
        if animal.age > max_age or animal.hunger > max_hunger:
            out.write(x, y, MINERAL)
            return

        nx, ny = random_move(grid, x, y, self.rng)
        target = grid.kind_at(nx, ny)
        if not out.taken(nx, ny):
            if target == prey:
                out.write(nx, ny, animal.fed())
                out.write(x, y, EMPTY)
                return
            if target == CellKind.EMPTY:
                out.write(nx, ny, animal)
                out.write(x, y, EMPTY)
                return

        out.write(x, y, animal)

    def _keep_grass(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        out.write(x, y, GRASS)

    def _regrow(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        out.write(x, y, GRASS)

    def _keep_empty(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        out.write(x, y, EMPTY)


class LifeRules(Rules):
    """Conway's Game of Life on a bounded grid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    name = "life"

    def __init__(self, vectorized: bool = True) -> None:
        super().__init__()
        self.vectorized = vectorized
        self._counts: Optional[np.ndarray] = None
        self._handlers = {
            CellKind.ALIVE: self._update_alive,
            CellKind.EMPTY: self._update_empty,
        }

    def begin_step(self, grid: Grid) -> None:
        """Count neighbors for the whole grid at once when vectorized."""
        self._counts = count_all_alive_neighbors(grid) if self.vectorized else None

    def neighbors(self, grid: Grid, x: int, y: int) -> int:
        if self._counts is not None:
            return int(self._counts[y, x])
        return count_alive_neighbors(grid, x, y)

    def _update_alive(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        n = self.neighbors(grid, x, y)
        out.write(x, y, ALIVE if n in (2, 3) else EMPTY)

    def _update_empty(self, grid: Grid, x: int, y: int, out: TickBuffer) -> None:
        out.write(x, y, ALIVE if self.neighbors(grid, x, y) == 3 else EMPTY)
