# gardenswap/routers/onboard.py

from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from gardenswap.deps import get_onboarding_service
from gardenswap.errors import ProcedureError
from gardenswap.logging_config import get_logger
from gardenswap.schemas_pkg.onboarding import (
    REQUIRED_WIRE_FIELDS,
    ErrorResponse,
    OnboardingRequest,
    OnboardingResponse,
)
from gardenswap.services.onboarding_service import OnboardingService

router = APIRouter()   # prefix is added in main.py
logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


@router.post(
    "/onboard",
    response_model=OnboardingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def onboard(
    request: Request,
    service_provider: Callable[[], OnboardingService] = Depends(get_onboarding_service),
):
    """
    Create the account, location and membership for a freshly signed-up user.
    Everything past validation is done by the transactional procedure.
    """
    try:
        body = await request.json()

        if not isinstance(body, dict):
            body = {}

        if not all(body.get(field) for field in REQUIRED_WIRE_FIELDS):
            return _error(400, "Missing required fields")

        try:
            payload = OnboardingRequest.model_validate(body)
        except ValidationError as e:
            logger.warning("onboard_invalid_payload", errors=e.errors(include_input=False))
            return _error(400, "Invalid field values")

        service = service_provider()

        try:
            result = await run_in_threadpool(service.onboard, payload)
        except ProcedureError as e:
            logger.error("onboard_rpc_failed", user_id=payload.user_id, error=e.message)
            return _error(500, e.message)

        logger.info("onboard_completed", user_id=payload.user_id)
        return OnboardingResponse(ok=True, result=result)

    except Exception as e:
        logger.error("onboard_unexpected_error", exc_info=e)
        return _error(500, "Unexpected server error")
