"""Tests for cell values."""

import dataclasses

import numpy as np
import pytest

from cellworld.core.cells import ECOSYSTEM_SYMBOLS, LIFE_SYMBOLS, Cell, CellKind


class TestCell:
    """Test cases for the Cell value type."""

    def test_default_is_empty(self):
        cell = Cell()
        assert cell.kind == CellKind.EMPTY
        assert cell.age == 0
        assert cell.hunger == 0
        assert cell.male is False

    def test_symbols(self):
        assert Cell.grass().symbol == "#"
        assert Cell.mineral().symbol == "."
        assert Cell(CellKind.SHEEP).symbol == "S"
        assert Cell(CellKind.WOLF).symbol == "W"
        assert Cell.empty().symbol == " "

    def test_life_symbols(self):
        """The life frame draws empty cells as dots."""
        assert LIFE_SYMBOLS[CellKind.ALIVE] == "*"
        assert LIFE_SYMBOLS[CellKind.EMPTY] == "."
        assert ECOSYSTEM_SYMBOLS[CellKind.EMPTY] == " "

    def test_is_animal(self):
        assert Cell(CellKind.SHEEP).is_animal
        assert Cell(CellKind.WOLF).is_animal
        assert not Cell.grass().is_animal
        assert not Cell.alive().is_animal

    def test_aged_returns_new_value(self):
        """Aging produces a new value and leaves the original untouched."""
        sheep = Cell(CellKind.SHEEP, age=3, hunger=2, male=True)
        older = sheep.aged()

        assert older == Cell(CellKind.SHEEP, age=4, hunger=3, male=True)
        assert sheep.age == 3
        assert sheep.hunger == 2

    def test_fed_resets_hunger(self):
        wolf = Cell(CellKind.WOLF, age=7, hunger=9)
        assert wolf.fed() == Cell(CellKind.WOLF, age=7, hunger=0)

    def test_cells_are_immutable(self):
        cell = Cell(CellKind.SHEEP)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.age = 5

    def test_animal_sex_comes_from_rng(self, scripted_rng):
        assert Cell.sheep(scripted_rng(coin=0.1)).male is True
        assert Cell.wolf(scripted_rng(coin=0.9)).male is False

    def test_new_animals_start_young(self):
        rng = np.random.default_rng(0)
        sheep = Cell.sheep(rng)
        assert sheep.kind == CellKind.SHEEP
        assert sheep.age == 0
        assert sheep.hunger == 0

        wolf = Cell.wolf(rng, age=5, hunger=1)
        assert (wolf.kind, wolf.age, wolf.hunger) == (CellKind.WOLF, 5, 1)

    def test_sex_is_roughly_balanced(self):
        rng = np.random.default_rng(1)
        males = sum(Cell.sheep(rng).male for _ in range(1000))
        assert 400 <= males <= 600
