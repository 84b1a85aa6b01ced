"""Extract decoded text fields and people from a whole feed document.

Works the same for RSS 2.0, RSS 1.0 and Atom since elements are matched by
local name. Decoding failures never abort the document: the affected text
field is recorded with empty text and the error message.
"""

from __future__ import annotations

import io
import logging

from lxml import etree

from feedtext.config import ExtractConfig
from feedtext.core.names import parse_name_address
from feedtext.core.text import parse_text, text_type
from feedtext.errors import EntityError
from feedtext.models import FeedText, Person, TextField
from feedtext.pull import Source, element_path, iter_elements, local_name

logger = logging.getLogger(__name__)


def extract_feed(source: Source, config: ExtractConfig | None = None) -> FeedText:
    """Extract configured text and person fields from a feed file or stream.

    Raises:
        lxml.etree.XMLSyntaxError: The document isn't well-formed (and
            ``config.recover`` is off).
    """
    config = config or ExtractConfig()
    name = source if isinstance(source, str) else getattr(source, "name", "<stream>")
    result = FeedText(source=str(name))

    person_fields = set(config.person_fields)
    text_fields = set(config.text_fields)

    for el in iter_elements(source, person_fields | text_fields, recover=config.recover):
        tag = local_name(el)
        if tag in person_fields:
            person = _parse_person(el)
            if person.name or person.address:
                result.people.append(person)
        else:
            result.fields.append(_parse_field(el))

    logger.debug(
        "Extracted %d fields (%d errors) and %d people from %s",
        len(result.fields),
        len(result.errors),
        len(result.people),
        result.source,
    )
    return result


def extract_string(xml: str | bytes, config: ExtractConfig | None = None) -> FeedText:
    """Same as :func:`extract_feed` for an in-memory document."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    stream = io.BytesIO(xml)
    result = extract_feed(stream, config)
    result.source = "<string>"
    return result


def _parse_field(el: etree._Element) -> TextField:
    field = TextField(path=element_path(el), tag=local_name(el), type=text_type(el))
    try:
        field.text = parse_text(el)
    except EntityError as e:
        logger.warning("Could not decode %s: %s", field.path, e)
        field.error = str(e)
    return field


def _parse_person(el: etree._Element) -> Person:
    """Read an Atom person construct, or split an RSS "Name (address)" string."""
    person = Person(path=element_path(el), tag=local_name(el))
    children = {local_name(child): child for child in el if isinstance(child.tag, str)}

    # Any element child makes it a person construct; uri-only authors come back empty
    if children:
        if "name" in children:
            person.name = _text_or_empty(children["name"])
        if "email" in children:
            person.address = _text_or_empty(children["email"])
    else:
        person.name, person.address = parse_name_address(_text_or_empty(el))
    return person


def _text_or_empty(el: etree._Element) -> str:
    try:
        return parse_text(el)
    except EntityError as e:
        logger.warning("Could not decode %s: %s", element_path(el), e)
        return ""
