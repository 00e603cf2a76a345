"""Centralized domain constants for parcel-delivery simulations.

The default village map, the fixed mail route, and the numeric defaults
shared by the simulation driver, the experiments, and the CLI live here.
"""

from __future__ import annotations

EDGE_SEPARATOR = "-"
"""Separator joining the two location names of an edge descriptor."""

VILLAGE_ROADS: tuple[str, ...] = (
    "Alice's House-Bob's House",
    "Alice's House-Cabin",
    "Alice's House-Post Office",
    "Bob's House-Town Hall",
    "Daria's House-Ernie's House",
    "Daria's House-Town Hall",
    "Ernie's House-Grete's House",
    "Grete's House-Farm",
    "Grete's House-Shop",
    "Marketplace-Farm",
    "Marketplace-Post Office",
    "Marketplace-Shop",
    "Marketplace-Town Hall",
    "Shop-Town Hall",
)
"""Roads of the default village, one edge descriptor per road."""

START_PLACE = "Post Office"
"""Location where generated tasks place the robot."""

MAIL_ROUTE: tuple[str, ...] = (
    "Alice's House",
    "Cabin",
    "Alice's House",
    "Bob's House",
    "Town Hall",
    "Daria's House",
    "Ernie's House",
    "Grete's House",
    "Shop",
    "Grete's House",
    "Farm",
    "Marketplace",
    "Post Office",
)
"""Loop from the Post Office through every village location and back."""

PARCEL_COUNT = 5
"""Default number of parcels in a generated task."""

COMPARE_TASKS = 100
"""Default number of shared tasks per robot in a comparison run."""

COMPARE_TURN_LIMIT = 1_000
"""Turn cap applied to each comparison run so a stuck robot cannot hang it."""

ROBOT_NAMES: tuple[str, ...] = ("random", "route", "goal")
"""Names of the registered robot strategies, in comparison order."""
