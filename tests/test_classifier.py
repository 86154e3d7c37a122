"""Unit tests for the over-temperature policy."""

from __future__ import annotations

import math

import pytest

from models.records import NormalTemperature, OverTemperature, TelemetryReading
from services.classifier import TEMPERATURE_THRESHOLD, Classifier


def _reading(temperature: float) -> TelemetryReading:
    return TelemetryReading(
        device_id="365951380", epoch_millis=1640995229697, temperature=temperature
    )


def test_threshold_is_ninety() -> None:
    assert TEMPERATURE_THRESHOLD == 90.0


@pytest.mark.parametrize("temperature", [-40.0, 0.0, 10.48256793121914, 89.999999, 90.0])
def test_at_or_below_threshold_is_normal(temperature: float) -> None:
    assert Classifier().classify(_reading(temperature)) == NormalTemperature()


@pytest.mark.parametrize("temperature", [90.000001, 110.48256793121914, math.inf])
def test_above_threshold_is_over_temperature(temperature: float) -> None:
    result = Classifier().classify(_reading(temperature))

    assert result == OverTemperature(
        device_id="365951380", formatted_time="2022/01/01 00:00:29"
    )


def test_nan_is_normal() -> None:
    assert Classifier().classify(_reading(math.nan)) == NormalTemperature()
