"""Priority scoring for collection stops."""

from __future__ import annotations

from typing import Sequence

from ...config import settings
from ...models.domain import Stop
from .models import OptimizationParameters

LOWEST_PRIORITY = 1.0


def score(stop: Stop, parameters: OptimizationParameters) -> float:
    """Return the priority credit (km) for ``stop``; higher means visited sooner.

    The credit is subtracted from the travel distance when choosing the next
    stop, so it nudges the order without overriding geography. Plastic
    pickups earn their bonus only while ``prioritize_plastic_pickups`` is on;
    each level of declared ``priority`` above 1 always earns a smaller step.
    """

    credit = 0.0
    if parameters.prioritize_plastic_pickups and stop.carries_plastic:
        credit += settings.plastic_priority_bonus_km
    if stop.priority is not None and stop.priority > LOWEST_PRIORITY:
        credit += (stop.priority - LOWEST_PRIORITY) * settings.priority_level_bonus_km
    return credit


def seed_index(stops: Sequence[Stop], parameters: OptimizationParameters) -> int:
    """Index of the highest-priority stop; the earliest input position wins ties."""

    best_index = 0
    best_score = score(stops[0], parameters)
    for index in range(1, len(stops)):
        candidate = score(stops[index], parameters)
        if candidate > best_score:
            best_index, best_score = index, candidate
    return best_index
