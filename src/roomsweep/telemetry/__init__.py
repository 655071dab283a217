"""Telemetry provider system for roomsweep."""

from roomsweep.telemetry.base import Attr, Span, SpanKind, TelemetryProvider
from roomsweep.telemetry.console import ConsoleTelemetryProvider
from roomsweep.telemetry.mock import MockTelemetryProvider
from roomsweep.telemetry.noop import NoopTelemetryProvider

__all__ = [
    "Attr",
    "ConsoleTelemetryProvider",
    "MockTelemetryProvider",
    "NoopTelemetryProvider",
    "Span",
    "SpanKind",
    "TelemetryProvider",
]
