"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...errors import RouteOptimizationError
from ...schemas.routing import OptimizationRequest, OptimizationResponse
from ...services.routing.service import optimize_routes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=OptimizationResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizationRequest) -> OptimizationResponse:
    try:
        result = optimize_routes(
            [stop.to_domain() for stop in payload.stops],
            payload.parameters.to_domain(),
        )
    except RouteOptimizationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing routes: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize routes: {str(exc)}",
        ) from exc
    return OptimizationResponse.from_result(result)
