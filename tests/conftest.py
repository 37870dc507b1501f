import random

import pytest

from ecoroute.models.domain import Location, Stop


def _stop(sid: str, lat: float, lon: float, *, plastic: bool = False, load: float = 1.0) -> Stop:
    return Stop(
        stop_id=sid,
        location=Location(latitude=lat, longitude=lon),
        is_plastic=plastic,
        load=load,
    )


@pytest.fixture
def cape_town_stops() -> list[Stop]:
    return [
        _stop("A", -33.9249, 18.4241),
        _stop("B", -33.9169, 18.4167, plastic=True),
        _stop("C", -33.9269, 18.4233),
    ]


@pytest.fixture
def scattered_stops() -> list[Stop]:
    rng = random.Random(20240518)
    return [
        _stop(
            f"S{index:02d}",
            -33.9249 + rng.uniform(-0.05, 0.05),
            18.4241 + rng.uniform(-0.05, 0.05),
            plastic=rng.random() < 0.3,
        )
        for index in range(20)
    ]
