"""Generation scheduling for the ecosystem and Game of Life automata."""

from typing import Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .cells import ALIVE, ANIMALS, GRASS, LIFE_SYMBOLS, Cell, CellKind
from .config import LAST_WRITER_WINS, EcosystemConfig, LifeConfig
from .grid import Grid
from .patterns import PatternLibrary
from .rules import EcosystemRules, LifeRules, Rules, TickBuffer


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source owned by one automaton."""
    return np.random.default_rng(seed)


class Automaton:
    """Synchronous double-buffered cellular automaton.

    Each step reads only the current grid and writes a fresh next grid,
    which then replaces the current one wholesale.
    """

    # Kinds counted as population
    living_kinds: Tuple[CellKind, ...] = ()
    # Whether the render loop stops once the population is gone
    halts_on_extinction = False

    def __init__(self, grid: Grid, rules: Rules, collision: str = LAST_WRITER_WINS) -> None:
        """Initialize the automaton with a grid.

        Args:
            grid: Initial generation
            rules: Rule set applied to every cell
            collision: Write policy for the next grid
        """
        self.grid = grid
        self.rules = rules
        self.collision = collision
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.count(*self.living_kinds)

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def is_alive(self) -> bool:
        """True while at least one living cell remains."""
        return self.population > 0

    def step(self) -> None:
        """Advance the simulation by one generation."""
        out = TickBuffer(self.grid, self.collision)
        self.rules.begin_step(self.grid)
        for x, y in self.grid.coordinates():
            self.rules.update_cell(self.grid, x, y, out)

        self.grid = out.grid
        self._generation += 1
        self._update_population_history()

    def run(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run without rendering until the simulation finishes.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            reason = self._finish_reason()
            if reason:
                return self._generation, reason

        return self._generation, "max_generations"

    def _finish_reason(self) -> Optional[str]:
        if not self.is_alive():
            return "extinction"
        return None

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and per-kind counts
        """
        census = self.grid.census()
        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "census": {kind.name.lower(): census[kind] for kind in self._reported_kinds()},
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.width * self.grid.height),
        }

    def _reported_kinds(self) -> Tuple[CellKind, ...]:
        return tuple(CellKind)


class EcosystemAutomaton(Automaton):
    """Sheep, wolves, grass and minerals on a bounded grid."""

    living_kinds = ANIMALS
    halts_on_extinction = True

    def __init__(self, grid: Grid, config: Optional[EcosystemConfig] = None, rng=None) -> None:
        self.config = config or EcosystemConfig()
        self.rng = rng if rng is not None else make_rng()
        super().__init__(grid, EcosystemRules(self.rng, self.config), self.config.collision)

    @property
    def sheep(self) -> int:
        return self.grid.count(CellKind.SHEEP)

    @property
    def wolves(self) -> int:
        return self.grid.count(CellKind.WOLF)

    def _reported_kinds(self) -> Tuple[CellKind, ...]:
        return (CellKind.GRASS, CellKind.MINERAL, CellKind.SHEEP, CellKind.WOLF, CellKind.EMPTY)


class LifeAutomaton(Automaton):
    """Conway's Game of Life with cycle detection."""

    living_kinds = (CellKind.ALIVE,)

    def __init__(self, grid: Grid, vectorized: bool = True) -> None:
        self._seen_states: Dict[bytes, int] = {}
        self._state_history: Deque[bytes] = deque(maxlen=1000)
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        super().__init__(grid, LifeRules(vectorized=vectorized))

    @property
    def cycle_detected(self) -> bool:
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        self._check_for_cycles()
        super().step()

    def _finish_reason(self) -> Optional[str]:
        if self._cycle_detected:
            return "cycle"
        return super()._finish_reason()

    def _check_for_cycles(self) -> None:
        """Check if the current state has been seen before."""
        if self._cycle_detected:
            return

        current_state = self.grid.state_key()
        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        if len(self._state_history) == self._state_history.maxlen:
            oldest = self._state_history[0]
            if self._seen_states.get(oldest) == self._generation - len(self._state_history):
                del self._seen_states[oldest]
        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

    def get_statistics(self) -> Dict:
        stats = super().get_statistics()
        stats.update(
            {
                "cycle_detected": self._cycle_detected,
                "cycle_length": self._cycle_length,
                "cycle_start_generation": self._cycle_start_generation,
            }
        )
        return stats

    def _reported_kinds(self) -> Tuple[CellKind, ...]:
        return (CellKind.ALIVE, CellKind.EMPTY)


def populate_ecosystem(grid: Grid, num_sheep: int, num_wolves: int, rng, grass_probability: float = 0.25) -> None:
    """Seed grass at random, then drop animals on shuffled positions.

    Sheep take the first ``num_sheep`` shuffled positions and wolves the
    following ``num_wolves``, so animals never overwrite one another.
    Counts larger than the grid are clamped.
    """
    if num_sheep < 0 or num_wolves < 0:
        raise ValueError("Animal counts must be non-negative")

    for x, y in grid.coordinates():
        grid.set(x, y, GRASS if rng.random() < grass_probability else Cell())

    positions = rng.permutation(grid.width * grid.height)
    sheep_positions = positions[:num_sheep]
    wolf_positions = positions[num_sheep : num_sheep + num_wolves]
    for index in sheep_positions:
        y, x = divmod(int(index), grid.width)
        grid.set(x, y, Cell.sheep(rng))
    for index in wolf_positions:
        y, x = divmod(int(index), grid.width)
        grid.set(x, y, Cell.wolf(rng))


def populate_life(grid: Grid, density: float, rng) -> None:
    """Make each cell Alive with probability ``density``."""
    mask = rng.random((grid.height, grid.width)) < density
    grid.clear()
    for y, x in zip(*np.nonzero(mask)):
        grid.set(int(x), int(y), ALIVE)


def create_ecosystem(
    width: int,
    height: int,
    num_sheep: int,
    num_wolves: int,
    config: Optional[EcosystemConfig] = None,
    seed: Optional[int] = None,
    rng=None,
) -> EcosystemAutomaton:
    """Build a randomly populated ecosystem.

    Args:
        width: Grid width
        height: Grid height
        num_sheep: Sheep placed initially
        num_wolves: Wolves placed initially
        config: Thresholds and collision policy
        seed: Seed for a new random source (ignored when ``rng`` is given)
        rng: Random source to use for population and every step

    Returns:
        Ready-to-run EcosystemAutomaton
    """
    config = config or EcosystemConfig()
    rng = rng if rng is not None else make_rng(seed)
    grid = Grid(width, height)
    populate_ecosystem(grid, num_sheep, num_wolves, rng, config.grass_probability)
    return EcosystemAutomaton(grid, config, rng)


def create_life(
    width: int,
    height: int,
    config: Optional[LifeConfig] = None,
    pattern: Optional[str] = None,
    seed: Optional[int] = None,
) -> LifeAutomaton:
    """Build a Game of Life from random cells or a named pattern.

    Raises:
        ValueError: If ``pattern`` is not a known pattern name
    """
    config = config or LifeConfig()
    grid = Grid(width, height, symbols=LIFE_SYMBOLS)
    if pattern:
        library = PatternLibrary()
        loaded = library.get_pattern(pattern)
        if loaded is None:
            raise ValueError(
                f"Pattern '{pattern}' not found. Available patterns: {', '.join(library.list_patterns())}"
            )
        loaded.apply_centered(grid)
    else:
        populate_life(grid, config.density, make_rng(seed))
    return LifeAutomaton(grid)
