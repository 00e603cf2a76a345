"""Parcel-delivery robot simulation over a village road graph."""

from parcel_robot.config.types import RunResult
from parcel_robot.domain.graph import VILLAGE_GRAPH, build_graph
from parcel_robot.domain.robots import Action, goal_oriented_robot, random_robot, route_robot
from parcel_robot.domain.state import Parcel, VillageState, move
from parcel_robot.simulation.engine import TurnLimitExceeded, iter_turns, run_robot

__all__ = [
    "Action",
    "Parcel",
    "RunResult",
    "TurnLimitExceeded",
    "VILLAGE_GRAPH",
    "VillageState",
    "build_graph",
    "goal_oriented_robot",
    "iter_turns",
    "move",
    "random_robot",
    "route_robot",
    "run_robot",
]
