"""CLI entrypoint for single runs and robot comparisons.

This module owns CLI argument parsing and mode dispatch. Domain logic lives
in the other layers:

- ``parcel_robot.config``                 – constants and configuration dataclasses
- ``parcel_robot.simulation.engine``      – the ``run_robot`` turn loop
- ``parcel_robot.experiments.experiment`` – seeded runs and comparisons
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from parcel_robot.config.constants import (
    COMPARE_TASKS,
    COMPARE_TURN_LIMIT,
    PARCEL_COUNT,
    ROBOT_NAMES,
)
from parcel_robot.config.types import CompareConfig, SimulationConfig
from parcel_robot.experiments.experiment import compare_robots, run_simulation
from parcel_robot.simulation.engine import TurnLimitExceeded

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
"""Accepted ``--log-level`` values; DEBUG shows every move."""

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_robot_list(raw_robots: str) -> tuple[str, ...]:
    """Parse comma-delimited robot names."""
    robots = tuple(part.strip() for part in raw_robots.split(",") if part.strip())
    if not robots:
        raise ValueError("robots must not be empty")
    for robot in robots:
        if robot not in ROBOT_NAMES:
            valid = ", ".join(ROBOT_NAMES)
            raise ValueError(f"robots entries must be one of {valid}")
    return robots


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object], default: int | None
) -> int | None:
    """CLI > file > default resolution for integers where null means unset."""
    raw = _get_val(cli_val, key, file_cfg, default)
    if raw is None:
        return None
    return _coerce_int(raw, key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run parcel-delivery robots around the village")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--robot", type=str, choices=list(ROBOT_NAMES), default=None)
    parser.add_argument("--parcels", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--turn-limit",
        type=int,
        default=None,
        help="Stop with a non-zero exit status if parcels remain after this many turns",
    )
    parser.add_argument(
        "--compare",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run every robot in --robots on the same generated tasks",
    )
    parser.add_argument("--tasks", type=int, default=None)
    parser.add_argument("--robots", type=str, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=list(LOG_LEVELS), default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for single runs and comparisons.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults. Exits with status 1 when a turn limit is reached.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        is_compare = _get_bool(args.compare, "compare", file_cfg, False)
        parcel_count = _get_int(args.parcels, "parcels", file_cfg, PARCEL_COUNT)
        seed = _get_int(args.seed, "seed", file_cfg, 0)
        if is_compare:
            compare_config = CompareConfig(
                robots=_parse_robot_list(
                    _get_str(args.robots, "robots", file_cfg, ",".join(ROBOT_NAMES))
                ),
                n_tasks=_get_int(args.tasks, "tasks", file_cfg, COMPARE_TASKS),
                parcel_count=parcel_count,
                sim_seed=seed,
                turn_limit=_get_optional_int(
                    args.turn_limit, "turn_limit", file_cfg, COMPARE_TURN_LIMIT
                ),
            )
        else:
            sim_config = SimulationConfig(
                robot=_get_str(args.robot, "robot", file_cfg, "goal"),
                parcel_count=parcel_count,
                sim_seed=seed,
                turn_limit=_get_optional_int(args.turn_limit, "turn_limit", file_cfg, None),
            )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    summary: dict[str, object]
    try:
        if is_compare:
            mean_turns = compare_robots(compare_config)
            summary = {
                "mode": "compare",
                "tasks": compare_config.n_tasks,
                "parcels": compare_config.parcel_count,
                "seed": compare_config.sim_seed,
                "mean_turns": mean_turns,
            }
        else:
            result = run_simulation(sim_config)
            summary = {
                "mode": "single",
                "robot": sim_config.robot,
                "parcels": sim_config.parcel_count,
                "seed": sim_config.sim_seed,
                "completed": True,
                "turns": result.turns,
                "directions": list(result.directions),
            }
    except TurnLimitExceeded as exc:
        summary = {
            "mode": "compare" if is_compare else "single",
            "completed": False,
            "turn_limit": exc.turn_limit,
            "undelivered": len(exc.state.parcels),
        }
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        sys.exit(1)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
