"""Utility helpers for factorio-calcdata (logging and diagnostics)."""

from .diagnostics import DiagnosticsSink, DIAGNOSTICS_LOGGER_NAME
from .logging_config import setup_logging

__all__ = [
    "DiagnosticsSink",
    "DIAGNOSTICS_LOGGER_NAME",
    "setup_logging",
]
