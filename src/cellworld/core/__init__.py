"""Core cellular automata logic."""

from .cells import Cell, CellKind
from .grid import Grid
from .config import EcosystemConfig, LifeConfig
from .rules import EcosystemRules, LifeRules, TickBuffer
from .automaton import Automaton, EcosystemAutomaton, LifeAutomaton, create_ecosystem, create_life
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "CellKind",
    "Grid",
    "EcosystemConfig",
    "LifeConfig",
    "EcosystemRules",
    "LifeRules",
    "TickBuffer",
    "Automaton",
    "EcosystemAutomaton",
    "LifeAutomaton",
    "create_ecosystem",
    "create_life",
    "Pattern",
    "PatternLibrary",
]
