"""Parse, classify, and archive rejected telemetry submissions."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from app.schemas import NormalTempResponse, OverTempResponse, TemperatureResponse
from datastore.error_log import ErrorLog
from models.records import OverTemperature
from services.classifier import Classifier
from services.parser import ParseError, parse_reading

logger = logging.getLogger(__name__)


class TelemetryService:
    """Coordinates parsing, classification, and the shared error log."""

    def __init__(self, error_log: ErrorLog, classifier: Optional[Classifier] = None) -> None:
        self.error_log = error_log
        self.classifier = classifier if classifier is not None else Classifier()

    def parse_and_classify(self, raw: str) -> Tuple[Optional[TemperatureResponse], bool]:
        """Return the response payload and ``True``, or ``(None, False)`` after archiving ``raw``."""
        try:
            reading = parse_reading(raw)
        except ParseError as exc:
            self.reject(raw, reason=exc.reason, stage=exc.stage)
            return None, False

        result = self.classifier.classify(reading)
        if isinstance(result, OverTemperature):
            logger.info(
                "Over-temperature reading",
                extra={
                    "device_id": result.device_id,
                    "formatted_time": result.formatted_time,
                    "overtemp": True,
                },
            )
            return (
                OverTempResponse(
                    device_id=result.device_id,
                    formatted_time=result.formatted_time,
                ),
                True,
            )

        logger.debug(
            "Normal reading",
            extra={"device_id": reading.device_id, "overtemp": False},
        )
        return NormalTempResponse(), True

    def reject(self, raw: str, reason: str, stage: str = "envelope") -> None:
        """Archive a rejected submission verbatim."""
        logger.warning(
            "Rejected telemetry submission",
            extra={"stage": stage, "reason": reason, "raw": raw},
        )
        self.error_log.push(raw)

    def get_error_snapshot(self) -> list[str]:
        return self.error_log.snapshot()

    def clear_errors(self) -> int:
        removed = self.error_log.clear()
        logger.info("Cleared error log", extra={"error_count": removed})
        return removed
