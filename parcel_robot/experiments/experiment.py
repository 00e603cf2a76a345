"""Seeded task generation, single runs, and robot comparisons."""

from __future__ import annotations

import logging
import statistics
from random import Random

from parcel_robot.config.constants import PARCEL_COUNT, START_PLACE
from parcel_robot.config.types import CompareConfig, RunResult, SimulationConfig
from parcel_robot.domain.graph import VILLAGE_GRAPH, RoadGraph
from parcel_robot.domain.robots import make_robot
from parcel_robot.domain.state import VillageState
from parcel_robot.simulation.engine import run_robot

logger = logging.getLogger(__name__)


def generate_tasks(
    n_tasks: int,
    rng: Random,
    graph: RoadGraph = VILLAGE_GRAPH,
    parcel_count: int = PARCEL_COUNT,
    start: str = START_PLACE,
) -> list[VillageState]:
    """Generate ``n_tasks`` random starting states from one random stream."""
    if n_tasks < 0:
        raise ValueError("n_tasks must be >= 0")
    return [
        VillageState.random(graph, rng, parcel_count=parcel_count, start=start)
        for _ in range(n_tasks)
    ]


def run_simulation(config: SimulationConfig, graph: RoadGraph = VILLAGE_GRAPH) -> RunResult:
    """Generate one task and run the configured robot on it.

    Task generation and the robot's own choices draw from the same seeded
    ``Random``, so a config fully determines the run.
    """
    rng = Random(config.sim_seed)
    (state,) = generate_tasks(
        1, rng, graph, parcel_count=config.parcel_count, start=config.start_place
    )
    robot = make_robot(config.robot, rng)
    logger.info(
        "Running %s robot: %d parcel(s) from %s (seed=%d)",
        config.robot,
        len(state.parcels),
        state.place,
        config.sim_seed,
    )
    return run_robot(state, robot, turn_limit=config.turn_limit)


def compare_robots(config: CompareConfig, graph: RoadGraph = VILLAGE_GRAPH) -> dict[str, float]:
    """Run every configured robot on the same tasks and return mean turns per robot.

    Each robot gets a fresh ``Random`` seeded like the task generator, so
    adding or reordering robots does not change any other robot's result.
    """
    tasks = generate_tasks(
        config.n_tasks,
        Random(config.sim_seed),
        graph,
        parcel_count=config.parcel_count,
        start=config.start_place,
    )

    means: dict[str, float] = {}
    for name in config.robots:
        robot = make_robot(name, Random(config.sim_seed))
        turns = [run_robot(task, robot, turn_limit=config.turn_limit).turns for task in tasks]
        means[name] = statistics.fmean(turns)
        logger.info("%s robot: %.2f turns per task over %d tasks", name, means[name], len(tasks))
    return means
