"""Immutable village snapshots and the single move transition.

Delivery invariant: a parcel whose place equals its address is delivered and
is dropped by the transition that produced the equality, so no live state
ever carries one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

from parcel_robot.config.constants import PARCEL_COUNT, START_PLACE
from parcel_robot.domain.graph import VILLAGE_GRAPH, Location, RoadGraph


@dataclass(frozen=True)
class Parcel:
    """A parcel sitting at ``place`` that must be carried to ``address``."""

    place: Location
    address: Location

    @property
    def delivered(self) -> bool:
        return self.place == self.address


@dataclass(frozen=True)
class VillageState:
    """Robot location plus the parcels still awaiting delivery.

    ``graph`` is the road map the state moves over. It is shared, never
    copied, and takes no part in equality or hashing.
    """

    place: Location
    parcels: tuple[Parcel, ...] = ()
    graph: RoadGraph = field(default_factory=lambda: VILLAGE_GRAPH, compare=False, repr=False)

    def __post_init__(self) -> None:
        parcels = tuple(self.parcels)
        if any(parcel.delivered for parcel in parcels):
            raise ValueError("parcels must not include delivered parcels (place == address)")
        object.__setattr__(self, "parcels", parcels)

    @property
    def done(self) -> bool:
        """True once every parcel has been delivered."""
        return not self.parcels

    def move(self, destination: Location) -> VillageState:
        """Drive to an adjacent location, carrying and delivering parcels.

        A destination with no road from the current place leaves the world
        unchanged and returns this same instance. Parcels at the current place
        travel along first; the ones that reach their address are then dropped.
        """
        if destination not in self.graph.get(self.place, ()):
            return self
        carried = (
            Parcel(place=destination, address=parcel.address)
            if parcel.place == self.place
            else parcel
            for parcel in self.parcels
        )
        parcels = tuple(parcel for parcel in carried if not parcel.delivered)
        return VillageState(place=destination, parcels=parcels, graph=self.graph)

    @classmethod
    def random(
        cls,
        graph: RoadGraph,
        rng: Random,
        parcel_count: int = PARCEL_COUNT,
        start: Location = START_PLACE,
    ) -> VillageState:
        """Create a task with ``parcel_count`` parcels placed and addressed at random."""
        if parcel_count < 0:
            raise ValueError("parcel_count must be >= 0")
        if start not in graph:
            raise ValueError(f"start location is not on the road graph: {start!r}")
        places = list(graph)
        if len(places) < 2:
            raise ValueError("graph must contain at least two locations")

        parcels: list[Parcel] = []
        for _ in range(parcel_count):
            address = rng.choice(places)
            place = rng.choice(places)
            while place == address:
                place = rng.choice(places)
            parcels.append(Parcel(place=place, address=address))
        return cls(place=start, parcels=tuple(parcels), graph=graph)


def move(state: VillageState, destination: Location) -> VillageState:
    """Functional form of :meth:`VillageState.move`."""
    return state.move(destination)
