"""Tests for the turn loop in parcel_robot.simulation.engine."""

from __future__ import annotations

import logging
from random import Random
from typing import Any

import pytest

from parcel_robot.config.constants import MAIL_ROUTE
from parcel_robot.domain.graph import VILLAGE_GRAPH, build_graph
from parcel_robot.domain.robots import Action, goal_oriented_robot, random_robot, route_robot
from parcel_robot.domain.state import Parcel, VillageState
from parcel_robot.simulation.engine import (
    TurnLimitExceeded,
    TurnRecord,
    iter_turns,
    run_robot,
)

LINE = build_graph(["A-B", "B-C"])


def scripted_robot(state: VillageState, memory: Any) -> Action:
    """Pop the next direction off a scripted route held in memory."""
    return Action(direction=memory[0], memory=memory[1:])


class CountingRobot:
    """Always proposes the same direction and counts its invocations."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        self.calls = 0

    def __call__(self, state: VillageState, memory: Any) -> Action:
        self.calls += 1
        return Action(self.direction)


class TestRunRobot:
    def test_no_parcels_done_at_turn_zero(self) -> None:
        robot = CountingRobot("B")
        state = VillageState("A", (), LINE)
        result = run_robot(state, robot)
        assert result.turns == 0
        assert result.directions == ()
        assert result.final_state is state
        assert robot.calls == 0

    def test_two_hop_delivery(self) -> None:
        state = VillageState("A", (Parcel("A", "C"),), LINE)
        result = run_robot(state, goal_oriented_robot)
        assert result.turns == 2
        assert result.directions == ("B", "C")
        assert result.final_state == VillageState("C", (), LINE)

    def test_illegal_move_still_costs_a_turn(self) -> None:
        state = VillageState("A", (Parcel("A", "B"),), LINE)
        result = run_robot(state, scripted_robot, ("C", "B"))
        assert result.turns == 2
        assert result.directions == ("C", "B")
        assert result.final_state.done

    def test_memory_threaded_between_turns(self) -> None:
        seen: list[TurnRecord] = []
        state = VillageState("A", (Parcel("C", "A"),), LINE)
        run_robot(state, scripted_robot, ("B", "C", "B", "A"), on_move=seen.append)
        assert [r.memory for r in seen] == [("C", "B", "A"), ("B", "A"), ("A",), ()]
        assert [r.turn for r in seen] == [1, 2, 3, 4]
        assert [r.state.place for r in seen] == ["B", "C", "B", "A"]

    def test_trace_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="parcel_robot.simulation.engine")
        state = VillageState("A", (Parcel("A", "B"),), LINE)
        run_robot(state, goal_oriented_robot)
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["Moved to B", "Done in 1 turns"]


class TestTurnLimit:
    def test_stuck_robot_hits_limit(self) -> None:
        robot = CountingRobot("Nowhere")
        state = VillageState("A", (Parcel("A", "B"),), LINE)
        with pytest.raises(TurnLimitExceeded) as excinfo:
            run_robot(state, robot, turn_limit=3)
        assert robot.calls == 3
        assert excinfo.value.turn_limit == 3
        assert excinfo.value.state is state

    def test_zero_limit_never_asks_robot(self) -> None:
        robot = CountingRobot("B")
        state = VillageState("A", (Parcel("A", "B"),), LINE)
        with pytest.raises(TurnLimitExceeded):
            run_robot(state, robot, turn_limit=0)
        assert robot.calls == 0

    def test_finishing_on_last_allowed_turn_succeeds(self) -> None:
        state = VillageState("A", (Parcel("A", "C"),), LINE)
        assert run_robot(state, goal_oriented_robot, turn_limit=2).turns == 2

    def test_negative_limit_rejected(self) -> None:
        state = VillageState("A", (Parcel("A", "B"),), LINE)
        with pytest.raises(ValueError, match="turn_limit"):
            run_robot(state, goal_oriented_robot, turn_limit=-1)


class TestIterTurns:
    def test_history_of_snapshots(self) -> None:
        start = VillageState("A", (Parcel("A", "C"),), LINE)
        records = list(iter_turns(start, goal_oriented_robot))
        assert [r.state for r in records] == [
            VillageState("B", (Parcel("B", "C"),), LINE),
            VillageState("C", (), LINE),
        ]
        assert start.place == "A"

    def test_empty_for_finished_state(self) -> None:
        assert list(iter_turns(VillageState("A", (), LINE), goal_oriented_robot)) == []


class TestVillageRobots:
    @pytest.mark.parametrize("seed", range(10))
    def test_route_robot_needs_at_most_two_passes(self, seed: int) -> None:
        state = VillageState.random(VILLAGE_GRAPH, Random(seed))
        result = run_robot(state, route_robot, turn_limit=2 * len(MAIL_ROUTE))
        assert result.final_state.done

    @pytest.mark.parametrize("seed", range(10))
    def test_goal_oriented_robot_completes(self, seed: int) -> None:
        state = VillageState.random(VILLAGE_GRAPH, Random(seed))
        result = run_robot(state, goal_oriented_robot, turn_limit=200)
        assert result.final_state.done
        assert result.turns == len(result.directions)

    def test_random_robot_reproducible(self) -> None:
        state = VillageState.random(VILLAGE_GRAPH, Random(4))
        first = run_robot(state, random_robot(Random(4)), turn_limit=10_000)
        second = run_robot(state, random_robot(Random(4)), turn_limit=10_000)
        assert first == second
        assert first.final_state.done
