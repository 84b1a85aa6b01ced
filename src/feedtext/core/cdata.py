"""CDATA section handling for mixed text/CDATA spans."""

from __future__ import annotations

import logging

from feedtext.core.entities import decode_entities
from feedtext.errors import EntityError

logger = logging.getLogger(__name__)

CDATA_START = "<![CDATA["
CDATA_END = "]]>"


def strip_cdata(text: str) -> str:
    """Remove CDATA markers from *text*, keeping their payloads verbatim.

    Text outside CDATA sections is passed through :func:`decode_entities`.
    Never raises: a segment that fails to decode is emitted as-is, and an
    unterminated CDATA section is decoded as ordinary text from the end of
    the previous section onward.
    """
    parts: list[str] = []
    cursor = 0

    while cursor < len(text):
        start = text.find(CDATA_START, cursor)
        if start == -1:
            parts.append(_decode_segment(text[cursor:]))
            break

        end = text.find(CDATA_END, start + len(CDATA_START))
        if end == -1:
            logger.debug("Unterminated CDATA section at offset %d", start)
            parts.append(_decode_segment(text[cursor:]))
            break

        parts.append(_decode_segment(text[cursor:start]))
        parts.append(text[start + len(CDATA_START) : end])
        cursor = end + len(CDATA_END)

    return "".join(parts)


def _decode_segment(segment: str) -> str:
    try:
        return decode_entities(segment)
    except EntityError as e:
        logger.debug("Leaving segment undecoded: %s", e)
        return segment
