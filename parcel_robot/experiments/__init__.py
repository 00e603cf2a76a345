"""Experiments layer: seeded runs, robot comparisons, and the CLI."""

from parcel_robot.experiments.experiment import compare_robots, generate_tasks, run_simulation

__all__ = [
    "compare_robots",
    "generate_tasks",
    "run_simulation",
]
