"""Utility exports."""

from .errors import ERROR_STATUS, ErrorKind, PipelineError
from .helpers import coerce_text, coerce_yen_amount, validate_source_url
from .logger import get_logger

__all__ = [
    "get_logger",
    "ErrorKind",
    "PipelineError",
    "ERROR_STATUS",
    "validate_source_url",
    "coerce_yen_amount",
    "coerce_text",
]
