"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.schemas import (
    BadRequestResponse,
    ClearErrorsResponse,
    ErrorsResponse,
    TelemetrySubmission,
    TemperatureResponse,
)
from services.telemetry import TelemetryService
from settings import Settings

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"


def get_telemetry_service(request: Request) -> TelemetryService:
    return request.app.state.telemetry_service


def _bad_request(error: str = "bad request") -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=BadRequestResponse(error=error).model_dump(),
    )


def _is_json_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == CONTENT_TYPE_JSON


async def post_temperature(
    request: Request,
    service: TelemetryService = Depends(get_telemetry_service),
) -> Union[TemperatureResponse, JSONResponse]:
    if not _is_json_request(request):
        logger.warning(
            "Request header missing Content-Type %s",
            CONTENT_TYPE_JSON,
            extra={"status": status.HTTP_400_BAD_REQUEST},
        )
        return _bad_request("invalid content type")

    body = await request.body()
    try:
        submission = TelemetrySubmission.model_validate_json(body)
    except ValidationError as exc:
        service.reject(
            body.decode("utf-8", errors="replace"),
            reason=f"invalid request body: {exc.error_count()} validation error(s)",
        )
        return _bad_request()

    decision, ok = service.parse_and_classify(submission.data)
    if not ok:
        return _bad_request()
    return decision


async def get_errors(
    service: TelemetryService = Depends(get_telemetry_service),
) -> ErrorsResponse:
    return ErrorsResponse(errors=service.get_error_snapshot())


async def delete_errors(
    service: TelemetryService = Depends(get_telemetry_service),
) -> ClearErrorsResponse:
    removed = service.clear_errors()
    return ClearErrorsResponse(deleted=removed, detail=f"Success: Deleted {removed} errors")


async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


def build_router(settings: Settings) -> APIRouter:
    """Bind the handlers to the configured URL paths."""
    router = APIRouter()
    router.add_api_route(
        settings.post_temp_url,
        post_temperature,
        methods=["POST"],
        response_model=TemperatureResponse,
        responses={status.HTTP_400_BAD_REQUEST: {"model": BadRequestResponse}},
        summary="Classify one raw telemetry reading.",
    )
    router.add_api_route(
        settings.get_errors_url,
        get_errors,
        methods=["GET"],
        response_model=ErrorsResponse,
        summary="List rejected raw submissions.",
    )
    router.add_api_route(
        settings.delete_errors_url,
        delete_errors,
        methods=["DELETE"],
        response_model=ClearErrorsResponse,
        summary="Purge the rejected submission log.",
    )
    router.add_api_route(
        "/health",
        healthcheck,
        methods=["GET"],
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint.",
    )
    return router
