"""Service exports."""

from .inference_client import (
    DegradingInferenceClient,
    DemoInferenceClient,
    InferenceClient,
    InferenceReply,
    LiveInferenceClient,
    build_inference_client,
)
from .page_fetcher import fetch_page
from .response_parser import conform_to_schema, decode_model_json, extract_json_text, parse_model_reply
from .text_cleaner import TRUNCATION_MARKER, clean_page_text, sanitize, truncate_document

__all__ = [
    "fetch_page",
    "clean_page_text",
    "sanitize",
    "truncate_document",
    "TRUNCATION_MARKER",
    "InferenceClient",
    "InferenceReply",
    "LiveInferenceClient",
    "DemoInferenceClient",
    "DegradingInferenceClient",
    "build_inference_client",
    "extract_json_text",
    "decode_model_json",
    "conform_to_schema",
    "parse_model_reply",
]
