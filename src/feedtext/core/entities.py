"""XML character and predefined entity reference decoding.

Decoding is lenient about syntax and strict about meaning:

- An ``&`` with no ``;`` after it, or a reference with whitespace between
  ``&`` and ``;``, is not a reference at all. The rest of the input is copied
  through literally and scanning stops.
- A syntactically complete reference that cannot be resolved (an unknown name,
  digits that don't parse) raises, and no partial output is returned.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from feedtext.errors import InvalidNumericReference, UnknownEntity

logger = logging.getLogger(__name__)

PREDEFINED_ENTITIES: dict[str, str] = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")
_WHITESPACE_RE = re.compile(r"\s")

# Numeric references are parsed as unsigned 32-bit values
_MAX_DECIMAL_DIGITS = 10
_MAX_HEX_DIGITS = 8
_MAX_REFERENCE = 0xFFFFFFFF
_MAX_CODE_POINT = 0x10FFFF
_REPLACEMENT_CHAR = "\ufffd"


class ScanState(Enum):
    """States of the reference scanner in :func:`decode_entities`."""

    SCANNING = "scanning"
    IN_ENTITY = "in_entity"
    LITERAL_FALLBACK = "literal_fallback"
    DONE = "done"


def decode_entities(text: str) -> str:
    """Decode ``&name;``, ``&#N;`` and ``&#xH;`` references in *text*.

    Only the five predefined XML entities are recognized.

    Raises:
        UnknownEntity: A well-formed named reference outside the predefined set.
        InvalidNumericReference: Numeric digits that don't parse in their base.
    """
    out: list[str] = []
    pos = 0
    semi = -1
    state = ScanState.SCANNING

    while state is not ScanState.DONE:
        if state is ScanState.SCANNING:
            amp = text.find("&", pos)
            if amp == -1:
                out.append(text[pos:])
                state = ScanState.DONE
                continue
            out.append(text[pos:amp])
            pos = amp
            semi = text.find(";", pos + 1)
            if semi == -1 or _WHITESPACE_RE.search(text, pos + 1, semi):
                state = ScanState.LITERAL_FALLBACK
            else:
                state = ScanState.IN_ENTITY

        elif state is ScanState.IN_ENTITY:
            out.append(_resolve(text[pos + 1 : semi]))
            pos = semi + 1
            state = ScanState.SCANNING

        else:
            logger.debug("Passing through non-reference text at offset %d: %r", pos, text[pos : pos + 32])
            out.append(text[pos:])
            state = ScanState.DONE

    return "".join(out)


def _resolve(body: str) -> str:
    """Resolve the text between ``&`` and ``;`` to a single character."""
    if body.startswith("#"):
        return _decode_numeric(body[1:])
    try:
        return PREDEFINED_ENTITIES[body]
    except KeyError:
        raise UnknownEntity(body) from None


def _decode_numeric(ref: str) -> str:
    if ref.startswith("x"):
        digits, pattern, base, max_digits = ref[1:], _HEX_RE, 16, _MAX_HEX_DIGITS
    else:
        digits, pattern, base, max_digits = ref, _DECIMAL_RE, 10, _MAX_DECIMAL_DIGITS

    if not pattern.fullmatch(digits):
        raise InvalidNumericReference("#" + ref)
    significant = digits.lstrip("0") or "0"
    if len(significant) > max_digits:
        raise InvalidNumericReference("#" + ref)

    value = int(significant, base)
    if value > _MAX_REFERENCE:
        raise InvalidNumericReference("#" + ref)
    # Parses, but isn't a Unicode scalar value
    if value > _MAX_CODE_POINT or 0xD800 <= value <= 0xDFFF:
        return _REPLACEMENT_CHAR
    return chr(value)
