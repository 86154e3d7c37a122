"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class TelemetryReading:
    """A single validated device/time/temperature triple."""

    device_id: str
    epoch_millis: int
    temperature: float


@dataclass(slots=True, frozen=True)
class NormalTemperature:
    """Reading at or below the over-temperature threshold."""


@dataclass(slots=True, frozen=True)
class OverTemperature:
    """Reading strictly above the threshold, with its rendered timestamp."""

    device_id: str
    formatted_time: str


ClassificationResult = Union[NormalTemperature, OverTemperature]
