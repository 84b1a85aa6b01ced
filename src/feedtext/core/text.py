"""Plain-text extraction from a feed element's inner markup."""

from __future__ import annotations

from typing import Protocol, Union

from lxml import etree

from feedtext.core.cdata import CDATA_END, CDATA_START
from feedtext.core.entities import decode_entities
from feedtext.pull import inner_xml


class MarkupSource(Protocol):
    """Anything that can hand back an element's raw inner markup."""

    def inner_xml(self) -> str:
        ...


Element = Union[etree._Element, MarkupSource]


def raw_markup(element: Element) -> str:
    """Materialize the undecoded inner markup of *element*."""
    if isinstance(element, etree._Element):
        return inner_xml(element)
    return element.inner_xml()


def parse_text(element: Element) -> str:
    """Return the decoded text content of *element*.

    The inner markup is trimmed, then decoded. Only the first CDATA section is
    isolated here: text before it and text after it are each entity-decoded,
    and its payload is kept verbatim. Later CDATA sections in the trailing
    text are not stripped; ``strip_cdata`` handles any number of them.

    Raises:
        UnknownEntity, InvalidNumericReference: From decoding the text around
            the CDATA section, or the whole span when there is none.
    """
    text = raw_markup(element).strip()

    start = text.find(CDATA_START)
    if start == -1:
        return decode_entities(text)

    end = text.find(CDATA_END, start + len(CDATA_START))
    if end == -1:
        # Unterminated section: not CDATA after all
        return decode_entities(text)

    before = decode_entities(text[:start])
    payload = text[start + len(CDATA_START) : end]
    after = decode_entities(text[end + len(CDATA_END) :])
    return before + payload + after


def text_type(element: etree._Element, default: str = "text") -> str:
    """Return the ``type`` attribute of an Atom text construct, e.g. ``html``."""
    value = element.get("type")
    return value.strip().lower() if value else default
