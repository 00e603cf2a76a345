"""Road graph construction from edge descriptors.

Symmetry invariant: every edge is registered in both directions, so if B is a
neighbor of A then A is a neighbor of B. Repeated edges are kept as repeated
neighbor entries; random direction choice is weighted by them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

import networkx as nx

from parcel_robot.config.constants import EDGE_SEPARATOR, VILLAGE_ROADS

Location: TypeAlias = str

# Location -> neighboring locations, in edge order
RoadGraph: TypeAlias = Mapping[Location, tuple[Location, ...]]


def parse_edge(descriptor: str, separator: str = EDGE_SEPARATOR) -> tuple[Location, Location]:
    """Split one ``From-To`` descriptor into its two distinct locations."""
    parts = descriptor.split(separator)
    if len(parts) != 2:
        raise ValueError(
            f"edge descriptor must join exactly two locations with {separator!r}: {descriptor!r}"
        )
    from_place, to_place = parts
    if not from_place or not to_place:
        raise ValueError(f"edge descriptor has an empty location name: {descriptor!r}")
    if from_place == to_place:
        raise ValueError(f"edge descriptor must join two distinct locations: {descriptor!r}")
    return from_place, to_place


def build_graph(edges: Iterable[str], separator: str = EDGE_SEPARATOR) -> RoadGraph:
    """Build a read-only symmetric adjacency mapping from edge descriptors.

    Every descriptor is parsed before any neighbor is registered, so a
    malformed descriptor never leaves a partially built graph behind.
    Locations that appear in no edge are absent from the result.
    """
    pairs = [parse_edge(descriptor, separator) for descriptor in edges]

    neighbors: dict[Location, list[Location]] = {}
    for from_place, to_place in pairs:
        neighbors.setdefault(from_place, []).append(to_place)
        neighbors.setdefault(to_place, []).append(from_place)

    return MappingProxyType({place: tuple(roads) for place, roads in neighbors.items()})


def to_networkx(graph: RoadGraph) -> nx.Graph:
    """Return an undirected networkx graph with one edge per connected pair.

    Duplicate roads collapse into a single edge; path lengths are unaffected.
    """
    g = nx.Graph()
    for place, roads in graph.items():
        g.add_node(place)
        for neighbor in roads:
            g.add_edge(place, neighbor)
    return g


VILLAGE_GRAPH: RoadGraph = build_graph(VILLAGE_ROADS)
"""Road graph of the default village."""
