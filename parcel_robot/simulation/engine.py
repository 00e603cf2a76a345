"""Turn loop driving a robot until every parcel is delivered.

Each turn asks the robot for an action, applies it with ``VillageState.move``
and threads the returned memory into the next turn. Illegal directions are
absorbed by ``move`` and still count as a turn. Without a ``turn_limit`` the
loop runs until the parcels are gone, however long that takes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from parcel_robot.config.types import RunResult
from parcel_robot.domain.graph import Location
from parcel_robot.domain.robots import Robot
from parcel_robot.domain.state import VillageState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnRecord:
    """Trace event for one completed turn."""

    turn: int  # moves made so far, including this one
    direction: Location
    state: VillageState  # state after the move
    memory: Any


class TurnLimitExceeded(RuntimeError):
    """Raised when a run reaches its turn cap with parcels still outstanding."""

    def __init__(self, turn_limit: int, state: VillageState) -> None:
        super().__init__(
            f"{len(state.parcels)} parcel(s) undelivered after {turn_limit} turns"
        )
        self.turn_limit = turn_limit
        self.state = state


def iter_turns(
    state: VillageState,
    robot: Robot,
    memory: Any = None,
    *,
    turn_limit: int | None = None,
) -> Iterator[TurnRecord]:
    """Yield one record per move until the state has no parcels left.

    Raises TurnLimitExceeded instead of asking for move ``turn_limit + 1``.
    """
    if turn_limit is not None and turn_limit < 0:
        raise ValueError("turn_limit must be >= 0")
    turn = 0
    while state.parcels:
        if turn_limit is not None and turn >= turn_limit:
            raise TurnLimitExceeded(turn_limit, state)
        action = robot(state, memory)
        state = state.move(action.direction)
        memory = action.memory
        turn += 1
        logger.debug("Moved to %s", action.direction)
        yield TurnRecord(turn=turn, direction=action.direction, state=state, memory=memory)


def run_robot(
    state: VillageState,
    robot: Robot,
    memory: Any = None,
    *,
    turn_limit: int | None = None,
    on_move: Callable[[TurnRecord], None] | None = None,
) -> RunResult:
    """Run ``robot`` from ``state`` to completion and report the turn count."""
    turns = 0
    directions: list[Location] = []
    for record in iter_turns(state, robot, memory, turn_limit=turn_limit):
        turns = record.turn
        state = record.state
        directions.append(record.direction)
        if on_move is not None:
            on_move(record)
    logger.info("Done in %d turns", turns)
    return RunResult(turns=turns, final_state=state, directions=tuple(directions))
