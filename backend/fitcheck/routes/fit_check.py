"""
Fit Check Route

POST /fit-check        - Validate and score a furniture arrangement.
POST /fit-check/bounds - Quick check against the room boundaries only.
GET  /fit-checker/rules - The rules the engine was started with.
"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from fitcheck.core.fit_checker import FitChecker
from fitcheck.models.api import FitCheckRequest, FitCheckResponse, RulesResponse


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Fit Check"])


def get_fit_checker(request: Request) -> FitChecker:
    """The FitChecker created at startup."""
    return request.app.state.fit_checker


def _request_id(request: FitCheckRequest) -> str:
    return request.request_id or f"fit_check_{int(time.time() * 1000)}"


@router.post("/fit-check", response_model=FitCheckResponse)
def fit_check(
    request: FitCheckRequest,
    checker: FitChecker = Depends(get_fit_checker),
) -> FitCheckResponse:
    """
    Validate a furniture arrangement against the room and the loaded rules.

    This endpoint:
    1. Checks room boundaries and overlaps (errors)
    2. Checks clearances and, given a room_type, furniture relationships (warnings)
    3. Checks accessibility and safety when the options ask for it
    4. Returns issues, a 0-100 score and suggestions
    """
    request_id = _request_id(request)
    start = time.perf_counter()
    logger.info(
        "fit_check started request_id=%s items=%d",
        request_id, len(request.furniture_items),
    )

    try:
        result = checker.check_fit(
            request.room_geometry,
            request.furniture_items,
            request.options,
        )
    except Exception as e:
        logger.exception("fit_check failed request_id=%s", request_id)
        raise HTTPException(
            status_code=500,
            detail=f"Fit check failed: {str(e)}"
        )

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "fit_check completed request_id=%s passed=%s score=%d issues=%d duration=%.1fms",
        request_id, result.passed, result.score, len(result.issues), duration_ms,
    )

    return FitCheckResponse(
        data=result,
        request_id=request_id,
        processing_time_ms=round(duration_ms, 3),
    )


@router.post("/fit-check/bounds", response_model=FitCheckResponse)
def fit_check_bounds(
    request: FitCheckRequest,
    checker: FitChecker = Depends(get_fit_checker),
) -> FitCheckResponse:
    """
    Quick check with room boundaries only.

    Options in the request body are ignored.
    """
    request_id = _request_id(request)
    start = time.perf_counter()
    logger.info(
        "fit_check_bounds started request_id=%s items=%d",
        request_id, len(request.furniture_items),
    )

    try:
        result = checker.check_bounds(request.room_geometry, request.furniture_items)
    except Exception as e:
        logger.exception("fit_check_bounds failed request_id=%s", request_id)
        raise HTTPException(
            status_code=500,
            detail=f"Bounds check failed: {str(e)}"
        )

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "fit_check_bounds completed request_id=%s passed=%s score=%d duration=%.1fms",
        request_id, result.passed, result.score, duration_ms,
    )

    return FitCheckResponse(
        data=result,
        request_id=request_id,
        processing_time_ms=round(duration_ms, 3),
    )


@router.get("/fit-checker/rules", response_model=RulesResponse)
def get_rules(checker: FitChecker = Depends(get_fit_checker)) -> RulesResponse:
    """Expose the loaded rule configuration for introspection."""
    return RulesResponse(data=checker.rules.as_config())
