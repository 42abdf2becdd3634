"""Async HTTP page fetcher for caller-supplied job posting URLs."""

import asyncio
import re
from typing import Optional

import chardet
import httpx

from clinic_recruit_ai.config import BROWSER_HEADERS, FETCH_MAX_BYTES, FETCH_TIMEOUT_SECONDS
from clinic_recruit_ai.schemas.documents import RawPage
from clinic_recruit_ai.utils.errors import PipelineError
from clinic_recruit_ai.utils.helpers import validate_source_url
from clinic_recruit_ai.utils.logger import get_logger

logger = get_logger(__name__)

_META_CHARSET = re.compile(rb"""<meta[^>]+charset\s*=\s*["']?\s*([A-Za-z0-9_\-]+)""", re.IGNORECASE)
_CHARSET_SNIFF_BYTES = 4096
_CHARDET_SAMPLE_BYTES = 64 * 1024


def _declared_encoding(response: httpx.Response, body: bytes) -> Optional[str]:
    """Header charset, then <meta> declaration, else None."""
    if response.charset_encoding:
        return response.charset_encoding
    match = _META_CHARSET.search(body[:_CHARSET_SNIFF_BYTES])
    if match:
        return match.group(1).decode("ascii")
    return None


def _decode_body(response: httpx.Response, body: bytes) -> str:
    """
    Decode with the declared charset. Undeclared bodies are tried as UTF-8
    and, failing that, decoded with whatever chardet detects (Shift_JIS and
    EUC-JP pages often declare nothing).
    """
    encoding = _declared_encoding(response, body)
    if encoding is None:
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            detected = chardet.detect(body[:_CHARDET_SAMPLE_BYTES])
            encoding = detected["encoding"] or "utf-8"
            logger.info("No charset declared for %s; detected %s", response.url, encoding)
    try:
        return body.decode(encoding, errors="replace")
    except LookupError:
        logger.warning("Unknown charset %s for %s; decoding as utf-8", encoding, response.url)
        return body.decode("utf-8", errors="replace")


async def _get_capped(client: httpx.AsyncClient, url: str, max_bytes: int) -> RawPage:
    async with client.stream("GET", url) as response:
        if not response.is_success:
            logger.warning("HTTP error %s for %s", response.status_code, url)
            raise PipelineError.fetch_failed(response.status_code)

        chunks = []
        received = 0
        content_truncated = False
        async for chunk in response.aiter_bytes():
            if received + len(chunk) > max_bytes:
                chunks.append(chunk[: max_bytes - received])
                content_truncated = True
                break
            chunks.append(chunk)
            received += len(chunk)

        if content_truncated:
            logger.warning("Response from %s exceeded %s bytes; body cut", url, max_bytes)
        body = b"".join(chunks)
        return RawPage(
            url=str(response.url),
            status_code=response.status_code,
            text=_decode_body(response, body),
            content_truncated=content_truncated,
        )


async def fetch_page(
    url: str,
    timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
    max_bytes: int = FETCH_MAX_BYTES,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RawPage:
    """
    Fetch a public page with a browser-like identity. No retries.

    The URL is validated before any client exists. The whole request (connect,
    headers and body) must finish within timeout_seconds, otherwise it is
    cancelled and FetchTimeout is raised. Non-2xx raises FetchFailed with the
    status code; the body is capped at max_bytes.
    """
    url = validate_source_url(url)

    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=timeout_seconds,
            headers=BROWSER_HEADERS,
            transport=transport,
        ) as client:
            page = await asyncio.wait_for(_get_capped(client, url, max_bytes), timeout=timeout_seconds)
    except PipelineError:
        raise
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning("Fetching %s timed out after %ss", url, timeout_seconds)
        raise PipelineError.fetch_timeout() from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Request failed for %s: %s", url, str(e))
        raise PipelineError.fetch_failed() from e

    logger.info("Fetched %s (%s chars)", page.url, len(page.text))
    return page
