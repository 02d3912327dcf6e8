"""
Telemetry module - structured logging with credential masking.
"""

from openai_lite.telemetry.logger import (
    JsonFormatter,
    LibLogger,
    LogLevel,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LibLogger",
    "LogLevel",
    "SensitiveDataMasker",
    "TextFormatter",
    "get_logger",
]
