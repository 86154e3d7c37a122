"""Over-temperature policy for parsed telemetry readings."""

from __future__ import annotations

from models.records import (
    ClassificationResult,
    NormalTemperature,
    OverTemperature,
    TelemetryReading,
)
from services.parser import format_epoch

TEMPERATURE_THRESHOLD = 90.0


class Classifier:
    """Pure classification component that can be unit tested in isolation."""

    def __init__(self, threshold: float = TEMPERATURE_THRESHOLD) -> None:
        self.threshold = threshold

    def classify(self, reading: TelemetryReading) -> ClassificationResult:
        # Strictly greater: a reading exactly at the threshold is normal.
        if reading.temperature > self.threshold:
            return OverTemperature(
                device_id=reading.device_id,
                formatted_time=format_epoch(reading.epoch_millis),
            )
        return NormalTemperature()
