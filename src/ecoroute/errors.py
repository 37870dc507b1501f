"""Errors raised by the route optimization engine."""


class RouteOptimizationError(ValueError):
    """Base class for optimization failures surfaced to the caller."""


class InvalidParameters(RouteOptimizationError):
    """Vehicle capacity or stop limit is zero, negative or non-finite."""


class InvalidInput(RouteOptimizationError):
    """A stop location carries a non-finite coordinate."""
