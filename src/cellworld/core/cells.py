"""Cell values for the ecosystem and life automata."""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict


class CellKind(IntEnum):
    """Tag identifying what occupies a grid cell."""

    EMPTY = 0
    GRASS = 1
    MINERAL = 2
    SHEEP = 3
    WOLF = 4
    ALIVE = 5


ANIMALS = (CellKind.SHEEP, CellKind.WOLF)

ECOSYSTEM_SYMBOLS: Dict[CellKind, str] = {
    CellKind.EMPTY: " ",
    CellKind.GRASS: "#",
    CellKind.MINERAL: ".",
    CellKind.SHEEP: "S",
    CellKind.WOLF: "W",
    CellKind.ALIVE: "*",
}

LIFE_SYMBOLS: Dict[CellKind, str] = {**ECOSYSTEM_SYMBOLS, CellKind.EMPTY: "."}


@dataclass(frozen=True)
class Cell:
    """State of one grid cell.

    Cells are plain values. ``age``, ``hunger`` and ``male`` only carry
    meaning for animals; every other kind keeps them at their defaults.
    """

    kind: CellKind = CellKind.EMPTY
    age: int = 0
    hunger: int = 0
    male: bool = False

    @property
    def symbol(self) -> str:
        """Display character in the ecosystem frame.

        Frames are drawn from the grid's own symbol table; see
        :meth:`Grid.symbol_at`.
        """
        return ECOSYSTEM_SYMBOLS[self.kind]

    @property
    def is_animal(self) -> bool:
        return self.kind in ANIMALS

    def aged(self) -> "Cell":
        """Return this animal one tick older and hungrier."""
        return replace(self, age=self.age + 1, hunger=self.hunger + 1)

    def fed(self) -> "Cell":
        return replace(self, hunger=0)

    @classmethod
    def empty(cls) -> "Cell":
        return EMPTY

    @classmethod
    def grass(cls) -> "Cell":
        return GRASS

    @classmethod
    def mineral(cls) -> "Cell":
        return MINERAL

    @classmethod
    def alive(cls) -> "Cell":
        return ALIVE

    @classmethod
    def sheep(cls, rng, age: int = 0, hunger: int = 0) -> "Cell":
        """Create a sheep whose sex is drawn from ``rng``."""
        return cls(CellKind.SHEEP, age, hunger, bool(rng.random() < 0.5))

    @classmethod
    def wolf(cls, rng, age: int = 0, hunger: int = 0) -> "Cell":
        """Create a wolf whose sex is drawn from ``rng``."""
        return cls(CellKind.WOLF, age, hunger, bool(rng.random() < 0.5))


EMPTY = Cell(CellKind.EMPTY)
GRASS = Cell(CellKind.GRASS)
MINERAL = Cell(CellKind.MINERAL)
ALIVE = Cell(CellKind.ALIVE)
