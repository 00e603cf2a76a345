"""Configuration layer: constants and typed config dataclasses."""

from parcel_robot.config.constants import (
    COMPARE_TASKS,
    COMPARE_TURN_LIMIT,
    EDGE_SEPARATOR,
    MAIL_ROUTE,
    PARCEL_COUNT,
    ROBOT_NAMES,
    START_PLACE,
    VILLAGE_ROADS,
)
from parcel_robot.config.types import (
    CompareConfig,
    RunResult,
    SimulationConfig,
)

__all__ = [
    "COMPARE_TASKS",
    "COMPARE_TURN_LIMIT",
    "CompareConfig",
    "EDGE_SEPARATOR",
    "MAIL_ROUTE",
    "PARCEL_COUNT",
    "ROBOT_NAMES",
    "RunResult",
    "START_PLACE",
    "SimulationConfig",
    "VILLAGE_ROADS",
]
