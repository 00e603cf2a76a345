from parcel_robot.config.constants import (
    COMPARE_TASKS,
    COMPARE_TURN_LIMIT,
    EDGE_SEPARATOR,
    MAIL_ROUTE,
    PARCEL_COUNT,
    ROBOT_NAMES,
    START_PLACE,
    VILLAGE_ROADS,
)
from parcel_robot.domain.graph import VILLAGE_GRAPH


def test_village_roads_join_two_places() -> None:
    for road in VILLAGE_ROADS:
        assert len(road.split(EDGE_SEPARATOR)) == 2


def test_village_roads_are_unique() -> None:
    assert len(set(VILLAGE_ROADS)) == len(VILLAGE_ROADS)


def test_start_place_on_map() -> None:
    assert START_PLACE in VILLAGE_GRAPH


def test_mail_route_follows_roads_from_start() -> None:
    place = START_PLACE
    for stop in MAIL_ROUTE:
        assert stop in VILLAGE_GRAPH[place]
        place = stop
    assert place == START_PLACE


def test_mail_route_visits_every_place() -> None:
    assert set(MAIL_ROUTE) == set(VILLAGE_GRAPH)


def test_defaults_are_positive_ints() -> None:
    for value in (PARCEL_COUNT, COMPARE_TASKS, COMPARE_TURN_LIMIT):
        assert isinstance(value, int) and value > 0


def test_robot_names_distinct() -> None:
    assert len(set(ROBOT_NAMES)) == len(ROBOT_NAMES)
