"""Clean and normalize page text for LLM extraction."""

import re

from clinic_recruit_ai.schemas.documents import SanitizedDocument

TRUNCATION_MARKER = "\n..."

_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def clean_page_text(html_text: str, strip_layout: bool = False) -> str:
    """
    Reduce raw HTML to a plain-text approximation of its visible content.
    The steps run in a fixed order; later ones assume the earlier ones ran.
    """
    if not html_text:
        return ""

    text = html_text

    # Remove script and style blocks (content between tags)
    text = re.sub(r"<script[^>]*>[\s\S]*?</script\s*>", "", text, flags=re.IGNORECASE)
    text = re.sub(r"<style[^>]*>[\s\S]*?</style\s*>", "", text, flags=re.IGNORECASE)
    if strip_layout:
        for tag in ("nav", "footer", "header"):
            text = re.sub(rf"<{tag}\b[^>]*>[\s\S]*?</{tag}\s*>", "", text, flags=re.IGNORECASE)

    # Block-level closing tags and line breaks become newlines to preserve structure
    text = re.sub(r"</(?:p|div|h[1-6]|li|tr)\s*>", "\n", text, flags=re.IGNORECASE)
    text = re.sub(r"</?(?:br|hr)\b[^>]*>", "\n", text, flags=re.IGNORECASE)

    # Strip all remaining HTML tags
    text = re.sub(r"<[^>]+>", " ", text)

    # Decode common entities
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)

    # Collapse whitespace and newlines
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n\s*\n", "\n", text)
    return text.strip()


def sanitize(raw_html: str, strip_layout: bool = False) -> SanitizedDocument:
    """Sanitize a fetched page into a SanitizedDocument (not yet truncated)."""
    text = clean_page_text(raw_html, strip_layout=strip_layout)
    return SanitizedDocument(text=text, original_length=len(text), truncated=False)


def truncate_document(doc: SanitizedDocument, max_chars: int) -> SanitizedDocument:
    """Cut text longer than max_chars and append the truncation marker."""
    if len(doc.text) <= max_chars:
        return doc
    return SanitizedDocument(
        text=doc.text[:max_chars] + TRUNCATION_MARKER,
        original_length=doc.original_length,
        truncated=True,
    )
