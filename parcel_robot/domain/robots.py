"""Robot strategies: decision functions of ``(state, memory) -> Action``.

A robot keeps nothing between calls. Anything it needs on the next turn goes
into ``Action.memory``, which the driver hands back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from random import Random
from typing import Any, TypeAlias

import networkx as nx

from parcel_robot.config.constants import MAIL_ROUTE
from parcel_robot.domain.graph import Location, RoadGraph, to_networkx
from parcel_robot.domain.state import VillageState


@dataclass(frozen=True)
class Action:
    """A robot's decision: where to drive next and what to remember."""

    direction: Location
    memory: Any = None


Robot: TypeAlias = Callable[[VillageState, Any], Action]
RobotFactory: TypeAlias = Callable[[Random], Robot]


def random_robot(rng: Random) -> Robot:
    """Return a robot that picks a road uniformly at random every turn.

    Repeated roads between the same two places are proportionally more likely.
    """

    def robot(state: VillageState, memory: Any = None) -> Action:
        roads = state.graph.get(state.place, ())
        if not roads:
            raise ValueError(f"no roads lead out of {state.place!r}")
        return Action(direction=rng.choice(roads))

    return robot


def route_robot(state: VillageState, memory: Any = None) -> Action:
    """Follow the fixed mail route, starting over whenever it runs out."""
    route = tuple(memory) if memory else MAIL_ROUTE
    return Action(direction=route[0], memory=route[1:])


def find_route(graph: RoadGraph, start: Location, goal: Location) -> tuple[Location, ...]:
    """Return the places visited on a shortest road path, excluding ``start``."""
    try:
        path = nx.shortest_path(to_networkx(graph), start, goal)
    except (nx.NetworkXNoPath, nx.NodeNotFound) as exc:
        raise ValueError(f"no route from {start!r} to {goal!r}") from exc
    return tuple(path[1:])


def goal_oriented_robot(state: VillageState, memory: Any = None) -> Action:
    """Plan a shortest route to the first parcel, then to its address.

    Memory holds the rest of the current route; a new one is planned only
    when it has been used up.
    """
    route = tuple(memory) if memory else ()
    if not route:
        parcel = state.parcels[0]
        if parcel.place != state.place:
            route = find_route(state.graph, state.place, parcel.place)
        else:
            route = find_route(state.graph, state.place, parcel.address)
    return Action(direction=route[0], memory=route[1:])


ROBOTS: dict[str, RobotFactory] = {
    "random": random_robot,
    "route": lambda rng: route_robot,
    "goal": lambda rng: goal_oriented_robot,
}
"""Registered robots by name; each factory takes the run's ``Random``."""


def make_robot(name: str, rng: Random) -> Robot:
    """Look up a registered robot by name and bind it to ``rng``."""
    try:
        factory = ROBOTS[name]
    except KeyError as exc:
        valid = ", ".join(ROBOTS)
        raise ValueError(f"robot must be one of {valid}") from exc
    return factory(rng)
