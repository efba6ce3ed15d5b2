"""Run telemetry for document scans."""

from .jsonl import append_jsonl
from .run_logger import ScanTelemetryLogger

__all__ = ["ScanTelemetryLogger", "append_jsonl"]
