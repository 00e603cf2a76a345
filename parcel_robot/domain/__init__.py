"""Domain layer: road graph, village state, and robot strategies."""

from parcel_robot.domain.graph import (
    VILLAGE_GRAPH,
    Location,
    RoadGraph,
    build_graph,
    parse_edge,
    to_networkx,
)
from parcel_robot.domain.robots import (
    ROBOTS,
    Action,
    Robot,
    RobotFactory,
    find_route,
    goal_oriented_robot,
    make_robot,
    random_robot,
    route_robot,
)
from parcel_robot.domain.state import Parcel, VillageState, move

__all__ = [
    "Action",
    "Location",
    "Parcel",
    "ROBOTS",
    "RoadGraph",
    "Robot",
    "RobotFactory",
    "VILLAGE_GRAPH",
    "VillageState",
    "build_graph",
    "find_route",
    "goal_oriented_robot",
    "make_robot",
    "move",
    "parse_edge",
    "random_robot",
    "route_robot",
    "to_networkx",
]
