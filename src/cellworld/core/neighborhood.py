"""Neighborhood sampling: random moves and Moore-neighborhood census."""

from typing import Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cells import CellKind
from .grid import Grid

# Moore neighborhood, (0, 0) excluded
MOORE_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


def random_move(grid: Grid, x: int, y: int, rng) -> Tuple[int, int]:
    """Pick a random adjacent coordinate for an animal at (x, y).

    dx and dy are drawn independently from {-1, 0, 1}. A target outside the
    grid is not retried: the animal stays at (x, y).

    Args:
        grid: Grid the animal lives on
        x: Column coordinate
        y: Row coordinate
        rng: Random source exposing ``integers(low, high)``

    Returns:
        Target (x, y) coordinate, always in bounds
    """
    dx = int(rng.integers(0, 3)) - 1
    dy = int(rng.integers(0, 3)) - 1
    nx, ny = x + dx, y + dy
    if grid.in_bounds(nx, ny):
        return (nx, ny)
    return (x, y)


def count_alive_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count Alive cells among the in-bounds Moore neighbors of (x, y).

    Offsets that fall outside the grid are skipped; there is no wraparound.
    """
    count = 0
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and grid.kind_at(nx, ny) == CellKind.ALIVE:
            count += 1
    return count


def count_all_alive_neighbors(grid: Grid) -> np.ndarray:
    """Count Alive neighbors for every cell using a PyTorch convolution.

    Zero padding gives the same bounded topology as
    :func:`count_alive_neighbors`.

    Returns:
        (height, width) array of neighbor counts
    """
    alive = torch.from_numpy((grid.kinds == CellKind.ALIVE).astype(np.float32))
    counts = F.conv2d(alive.unsqueeze(0).unsqueeze(0), _KERNEL, padding=1)
    return counts[0, 0].numpy().astype(np.int8)
