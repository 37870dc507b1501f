"""API route modules."""

from . import health, routes

__all__ = ["health", "routes"]
