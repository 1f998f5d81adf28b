"""Shared fixtures for cellworld tests."""

from collections import deque

import pytest


class ScriptedRandom:
    """Random source that replays a fixed list of (dx, dy) moves.

    ``integers(0, 3)`` returns the scripted offsets shifted into [0, 3).
    Running out of moves raises IndexError, so a test fails loudly when a
    rule draws a move it should not have drawn.
    """

    def __init__(self, moves=(), coin=0.0):
        self._draws = deque(value + 1 for move in moves for value in move)
        self._coin = coin

    def integers(self, low, high):
        return self._draws.popleft()

    def random(self, size=None):
        return self._coin

    @property
    def remaining(self):
        return len(self._draws) // 2


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
