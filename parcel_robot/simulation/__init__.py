"""Simulation engine: the turn loop and its trace records."""

from parcel_robot.simulation.engine import (
    TurnLimitExceeded,
    TurnRecord,
    iter_turns,
    run_robot,
)

__all__ = [
    "TurnLimitExceeded",
    "TurnRecord",
    "iter_turns",
    "run_robot",
]
