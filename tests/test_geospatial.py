import math

import pytest

from ecoroute.config import settings
from ecoroute.errors import InvalidInput
from ecoroute.models.domain import Location
from ecoroute.services.geospatial import distance_km, duration_min, haversine_km


def test_haversine_one_degree_of_latitude():
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)


def test_distance_is_symmetric_and_zero_on_same_point():
    a = Location(-33.9249, 18.4241)
    b = Location(-33.9169, 18.4167)
    assert distance_km(a, a) == 0.0
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))
    assert 1.0 < distance_km(a, b) < 1.2


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_distance_rejects_non_finite_coordinates(bad):
    with pytest.raises(InvalidInput):
        distance_km(Location(bad, 18.0), Location(-33.0, 18.0))
    with pytest.raises(InvalidInput):
        distance_km(Location(-33.0, 18.0), Location(-33.0, bad))


def test_duration_uses_free_flow_speed():
    assert duration_min(40.0) == pytest.approx(60.0)
    assert duration_min(1.0, consider_traffic=False) == pytest.approx(1.5)


def test_duration_applies_congestion_factor():
    assert duration_min(1.0, consider_traffic=True) == pytest.approx(1.5 * 1.4)


def test_duration_follows_configured_speed(monkeypatch):
    monkeypatch.setattr(settings, "average_speed_kmh", 60.0)
    assert duration_min(60.0) == pytest.approx(60.0)

