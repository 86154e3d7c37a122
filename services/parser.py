"""Staged parsing of raw telemetry lines into :class:`TelemetryReading`.

A raw line looks like ``<device_id>:<epoch_ms>:'Temperature':<value>``.
Each stage rejects with its own :class:`ParseError` subclass so callers can
tell which check a line failed.
"""

from __future__ import annotations

import math
import re

from models.records import TelemetryReading


# (probe, separator) pairs, checked in order; the first probe found wins.
TEMPERATURE_MARKERS: tuple[tuple[str, str], ...] = (
    (":Temperature:", ":Temperature:"),
    (":'Temperature':", ":'Temperature':"),
    ("\":\\'Temperature:\\'\"", ":'Temperature':"),
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_MILLIS_PER_DAY = 86_400_000

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INFINITY_RE = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)


class ParseError(ValueError):
    """Base class for rejected telemetry lines."""

    stage = "parse"

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(reason)
        self.raw = raw
        self.reason = reason


class NoTemperatureMarker(ParseError):
    stage = "marker"


class MalformedMarkerSplit(ParseError):
    stage = "marker_split"


class MalformedDeviceField(ParseError):
    stage = "device_field"


class InvalidEpoch(ParseError):
    stage = "epoch"


class InvalidTemperature(ParseError):
    stage = "temperature"


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a count of days since 1970-01-01."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def format_epoch(epoch_millis: int) -> str:
    """Render milliseconds since the Unix epoch as ``YYYY/MM/DD HH:MM:SS`` in UTC.

    Defined for every int64 value. Years are zero-padded to four digits, keep
    a leading ``-`` before year 0, and grow past four digits after 9999.
    """
    days, millis_of_day = divmod(epoch_millis, _MILLIS_PER_DAY)
    year, month, day = _civil_from_days(days)
    minutes, second = divmod(millis_of_day // 1000, 60)
    hour, minute = divmod(minutes, 60)
    sign = "-" if year < 0 else ""
    return (
        f"{sign}{abs(year):04d}/{month:02d}/{day:02d} "
        f"{hour:02d}:{minute:02d}:{second:02d}"
    )


def _find_separator(raw: str) -> str | None:
    for probe, separator in TEMPERATURE_MARKERS:
        if probe in raw:
            return separator
    return None


def _parse_epoch(raw: str, value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidEpoch(raw, "epoch is not a base-10 integer")
    epoch = int(value)
    if not _INT64_MIN <= epoch <= _INT64_MAX:
        raise InvalidEpoch(raw, "epoch is out of int64 range")
    if epoch == 0:
        raise InvalidEpoch(raw, "epoch is zero")
    return epoch


def _parse_temperature(raw: str, value: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise InvalidTemperature(raw, "temperature is not a number")
    temperature = float(value)
    if math.isinf(temperature) and not _INFINITY_RE.fullmatch(value):
        raise InvalidTemperature(raw, "temperature is out of float64 range")
    return temperature


def parse_reading(raw: str) -> TelemetryReading:
    """Parse one raw telemetry line, raising a :class:`ParseError` subclass on failure."""
    separator = _find_separator(raw)
    if separator is None:
        raise NoTemperatureMarker(raw, "no temperature marker")

    fields = raw.split(separator)
    if len(fields) != 2:
        raise MalformedMarkerSplit(raw, "expected exactly one temperature separator")
    prefix, suffix = fields

    device_fields = prefix.split(":")
    if len(device_fields) != 2:
        raise MalformedDeviceField(raw, "expected <device_id>:<epoch_ms> before the marker")
    device_id, epoch_raw = device_fields

    epoch_millis = _parse_epoch(raw, epoch_raw)
    temperature = _parse_temperature(raw, suffix)

    return TelemetryReading(
        device_id=device_id,
        epoch_millis=epoch_millis,
        temperature=temperature,
    )
