"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List, Literal, Union

from pydantic import BaseModel, Field


class TelemetrySubmission(BaseModel):
    """Request envelope carrying one raw telemetry line."""

    data: str = Field(
        ...,
        min_length=1,
        description="Raw line shaped like <device_id>:<epoch_ms>:'Temperature':<value>.",
    )


class NormalTempResponse(BaseModel):
    overtemp: Literal[False] = False


class OverTempResponse(BaseModel):
    overtemp: Literal[True] = True
    device_id: str
    formatted_time: str = Field(..., description="UTC time rendered as YYYY/MM/DD HH:MM:SS.")


TemperatureResponse = Union[OverTempResponse, NormalTempResponse]


class BadRequestResponse(BaseModel):
    error: str = "bad request"


class ErrorsResponse(BaseModel):
    """Rejected raw submissions, oldest first."""

    errors: List[str] = Field(default_factory=list)


class ClearErrorsResponse(BaseModel):
    deleted: int = Field(..., ge=0)
    detail: str
