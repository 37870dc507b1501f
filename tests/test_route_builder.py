import pytest

from ecoroute.errors import InvalidParameters
from ecoroute.models.domain import Location, Stop
from ecoroute.services.routing.builder import build_routes
from ecoroute.services.routing.models import OptimizationParameters


def _stop(sid: str, lat: float, lon: float, *, plastic: bool = False, load: float = 1.0, **extra) -> Stop:
    return Stop(
        stop_id=sid,
        location=Location(latitude=lat, longitude=lon),
        is_plastic=plastic,
        load=load,
        **extra,
    )


def _ids(routes: list[list[Stop]]) -> list[list[str]]:
    return [[stop.stop_id for stop in route] for route in routes]


def test_empty_input_yields_no_routes():
    assert build_routes([], OptimizationParameters()) == []


def test_seed_is_highest_priority_stop(cape_town_stops):
    routes = build_routes(cape_town_stops, OptimizationParameters(vehicle_capacity=10, max_stops=15))
    assert _ids(routes) == [["B", "A", "C"]]


def test_pure_nearest_neighbour_without_priority(cape_town_stops):
    params = OptimizationParameters(vehicle_capacity=10, max_stops=15, prioritize_plastic_pickups=False)
    assert _ids(build_routes(cape_town_stops, params)) == [["A", "C", "B"]]


def test_priority_nudges_a_slightly_farther_plastic_stop_ahead():
    stops = [
        _stop("S0", 0.0, 0.0, plastic=True),
        _stop("N1", 0.009, 0.0),
        _stop("P2", -0.0117, 0.0, plastic=True),
    ]
    assert _ids(build_routes(stops, OptimizationParameters())) == [["S0", "P2", "N1"]]
    off = OptimizationParameters(prioritize_plastic_pickups=False)
    assert _ids(build_routes(stops, off)) == [["S0", "N1", "P2"]]


def test_priority_does_not_override_geography():
    stops = [
        _stop("S0", 0.0, 0.0),
        _stop("N1", 0.009, 0.0),
        _stop("P2", -0.05, 0.0, plastic=True),
    ]
    params = OptimizationParameters(prioritize_plastic_pickups=True)
    # P2 seeds the route; from there S0 is far closer than N1.
    assert _ids(build_routes(stops, params)) == [["P2", "S0", "N1"]]


def test_split_reseeds_from_nearest_remaining_stop():
    stops = [_stop(f"L{i}", 0.01 * i, 0.0) for i in range(4)]
    params = OptimizationParameters(vehicle_capacity=2, max_stops=15, prioritize_plastic_pickups=False)
    assert _ids(build_routes(stops, params)) == [["L0", "L1"], ["L2", "L3"]]


def test_max_stops_limits_route_length():
    stops = [_stop(f"L{i}", 0.01 * i, 0.0) for i in range(5)]
    params = OptimizationParameters(vehicle_capacity=100, max_stops=2)
    assert _ids(build_routes(stops, params)) == [["L0", "L1"], ["L2", "L3"], ["L4"]]


def test_weighted_loads_respect_capacity():
    stops = [
        _stop("A", 0.0, 0.0, load=3),
        _stop("B", 0.01, 0.0, load=3),
        _stop("C", 0.02, 0.0, load=3),
    ]
    routes = build_routes(stops, OptimizationParameters(vehicle_capacity=6, max_stops=10))
    assert _ids(routes) == [["A", "B"], ["C"]]
    assert all(sum(stop.load for stop in route) <= 6 for route in routes)


def test_oversized_stop_gets_its_own_route():
    stops = [
        _stop("A", 0.0, 0.0),
        _stop("HEAVY", 0.01, 0.0, load=5),
        _stop("C", 0.02, 0.0),
    ]
    routes = build_routes(stops, OptimizationParameters(vehicle_capacity=2, max_stops=10))
    assert _ids(routes) == [["A"], ["HEAVY"], ["C"]]


def test_oversized_seed_is_kept(caplog):
    stops = [_stop("HEAVY", 0.0, 0.0, load=50)]
    with caplog.at_level("WARNING"):
        routes = build_routes(stops, OptimizationParameters(vehicle_capacity=10))
    assert _ids(routes) == [["HEAVY"]]
    assert "exceeds vehicle capacity" in caplog.text


def test_every_stop_assigned_exactly_once(scattered_stops):
    routes = build_routes(scattered_stops, OptimizationParameters(vehicle_capacity=4, max_stops=3))
    assigned = [stop.stop_id for route in routes for stop in route]
    assert sorted(assigned) == sorted(stop.stop_id for stop in scattered_stops)
    assert all(len(route) <= 3 for route in routes)


@pytest.mark.parametrize(
    "capacity, max_stops",
    [(0, 5), (-1, 5), (float("nan"), 5), (float("inf"), 5), (5, 0), (5, -1)],
)
def test_invalid_parameters(capacity, max_stops, cape_town_stops):
    with pytest.raises(InvalidParameters):
        build_routes(cape_town_stops, OptimizationParameters(vehicle_capacity=capacity, max_stops=max_stops))


def test_declared_priority_nudges_a_slightly_farther_stop_ahead():
    stops = [
        _stop("S0", 0.0, 0.0, priority=5),
        _stop("N1", 0.009, 0.0),
        _stop("H2", -0.0117, 0.0, priority=5),
    ]
    params = OptimizationParameters(prioritize_plastic_pickups=False)
    assert _ids(build_routes(stops, params)) == [["S0", "H2", "N1"]]
