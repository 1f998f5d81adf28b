"""Terminal cellular automata: a predator/prey ecosystem and Conway's Game of Life."""

__version__ = "0.1.0"

from .core.cells import Cell, CellKind
from .core.grid import Grid
from .core.automaton import (
    Automaton,
    EcosystemAutomaton,
    LifeAutomaton,
    create_ecosystem,
    create_life,
)
from .core.config import EcosystemConfig, LifeConfig

__all__ = [
    "Cell",
    "CellKind",
    "Grid",
    "Automaton",
    "EcosystemAutomaton",
    "LifeAutomaton",
    "create_ecosystem",
    "create_life",
    "EcosystemConfig",
    "LifeConfig",
]
