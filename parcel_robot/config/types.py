"""Configuration dataclasses and result containers for simulation runs.

All frozen dataclasses that parameterise single runs and robot comparisons
live here, together with the result record returned by the driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from parcel_robot.config.constants import (
    COMPARE_TASKS,
    COMPARE_TURN_LIMIT,
    PARCEL_COUNT,
    ROBOT_NAMES,
    START_PLACE,
)

if TYPE_CHECKING:
    from parcel_robot.domain.state import VillageState

__all__ = [
    "CompareConfig",
    "RunResult",
    "SimulationConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Outcome of one completed simulation run."""

    turns: int
    final_state: VillageState
    directions: tuple[str, ...]


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


def _validate_robot_name(robot: str) -> None:
    if robot not in ROBOT_NAMES:
        valid = ", ".join(ROBOT_NAMES)
        raise ValueError(f"robot must be one of {valid}")


def _validate_turn_limit(turn_limit: int | None) -> None:
    if turn_limit is not None and turn_limit < 0:
        raise ValueError("turn_limit must be >= 0")


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for a single robot run on a generated village task."""

    robot: str = "goal"
    parcel_count: int = PARCEL_COUNT
    sim_seed: int = 0
    turn_limit: int | None = None
    start_place: str = START_PLACE

    def __post_init__(self) -> None:
        _validate_robot_name(self.robot)
        if self.parcel_count < 0:
            raise ValueError("parcel_count must be >= 0")
        _validate_turn_limit(self.turn_limit)
        if not self.start_place:
            raise ValueError("start_place must not be empty")


@dataclass(frozen=True)
class CompareConfig:
    """Parameters for running several robots on the same generated tasks."""

    robots: tuple[str, ...] = ROBOT_NAMES
    n_tasks: int = COMPARE_TASKS
    parcel_count: int = PARCEL_COUNT
    sim_seed: int = 0
    turn_limit: int | None = COMPARE_TURN_LIMIT
    start_place: str = START_PLACE

    def __post_init__(self) -> None:
        if not self.robots:
            raise ValueError("robots must not be empty")
        if len(set(self.robots)) != len(self.robots):
            raise ValueError("robots must include distinct names")
        for robot in self.robots:
            _validate_robot_name(robot)
        if self.n_tasks < 1:
            raise ValueError("n_tasks must be >= 1")
        if self.parcel_count < 0:
            raise ValueError("parcel_count must be >= 0")
        _validate_turn_limit(self.turn_limit)
        if not self.start_place:
            raise ValueError("start_place must not be empty")
