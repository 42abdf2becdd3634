"""Helper utilities for the Clinic Recruit AI extraction pipeline."""

import math
import re
from typing import Any, Optional
from urllib.parse import urlsplit

import httpx

from clinic_recruit_ai.utils.errors import PipelineError

ALLOWED_URL_SCHEMES = ("http", "https")
_INVALID_HOST_CHARS = frozenset("<>\"{}|\\^`%")

_YEN_NUMBER = re.compile(r"^\d{1,3}(?:,\d{3})+$|^\d+$")


def validate_source_url(url: Any) -> str:
    """
    Return the URL stripped of surrounding whitespace if it is an absolute
    http(s) URL with a well-formed host. Anything else raises InvalidUrl.
    """
    if not isinstance(url, str) or not url.strip():
        raise PipelineError.invalid_url()
    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
        # Accessing .port validates the netloc (raises ValueError on garbage ports)
        _ = parts.port
        httpx.URL(candidate)
    except (ValueError, httpx.InvalidURL) as e:
        raise PipelineError.invalid_url() from e
    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.hostname:
        raise PipelineError.invalid_url()
    # httpx percent-encodes these in a host rather than rejecting them
    if any(c.isspace() or c in _INVALID_HOST_CHARS for c in parts.hostname):
        raise PipelineError.invalid_url()
    return candidate


def coerce_yen_amount(value: Any) -> Optional[int]:
    """
    Coerce a model-supplied amount to a non-negative whole-yen integer.
    Unit-bearing strings such as "25万円" are not converted; they become None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or value < 0:
            return None
        return int(round(value))
    if isinstance(value, str):
        text = value.strip()
        if _YEN_NUMBER.match(text):
            return int(text.replace(",", ""))
    return None


def coerce_text(value: Any) -> Optional[str]:
    """Coerce a model-supplied text field to a stripped string or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        return text or None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        items = [coerce_text(v) for v in value]
        joined = "\n".join(i for i in items if i)
        return joined or None
    return None
