"""Tunable parameters for the two rule sets."""

from dataclasses import dataclass

LAST_WRITER_WINS = "last-writer-wins"
FIRST_COME = "first-come"
COLLISION_POLICIES = (LAST_WRITER_WINS, FIRST_COME)


@dataclass(frozen=True)
class EcosystemConfig:
    """Predator/prey thresholds and initial grass cover.

    An animal dies once its age or hunger, after the per-tick increment,
    exceeds the matching maximum.
    """

    sheep_max_age: int = 50
    sheep_max_hunger: int = 5
    wolf_max_age: int = 60
    wolf_max_hunger: int = 10
    grass_probability: float = 0.25
    collision: str = LAST_WRITER_WINS

    def __post_init__(self) -> None:
        if not 0.0 <= self.grass_probability <= 1.0:
            raise ValueError("grass_probability must be between 0.0 and 1.0")
        if self.collision not in COLLISION_POLICIES:
            raise ValueError(
                f"Unknown collision policy '{self.collision}', "
                f"expected one of: {', '.join(COLLISION_POLICIES)}"
            )


@dataclass(frozen=True)
class LifeConfig:
    """Initial random population for the Game of Life."""

    density: float = 0.2

    def __post_init__(self) -> None:
        if not 0.0 <= self.density <= 1.0:
            raise ValueError("density must be between 0.0 and 1.0")
