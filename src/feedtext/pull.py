"""lxml-backed XML pull parsing for feed documents.

Supplies element boundaries and raw inner markup to the text decoders. The
parser keeps CDATA sections and never expands external entities, so an
element's inner markup can be re-materialized with CDATA intact.
"""

from __future__ import annotations

from typing import IO, Iterable, Iterator, Union

from lxml import etree

Source = Union[str, IO[bytes]]


# Shared by make_parser and iter_elements
PARSER_OPTIONS = {
    "strip_cdata": False,
    "resolve_entities": False,
    "no_network": True,
}


def make_parser(recover: bool = False) -> etree.XMLParser:
    """Return an XMLParser that preserves CDATA and doesn't resolve entities.

    Args:
        recover: If True, use lxml's recovery mode for broken documents.
    """
    return etree.XMLParser(recover=recover, **PARSER_OPTIONS)


def parse_string(xml: str | bytes, recover: bool = False) -> etree._Element:
    """Parse an in-memory feed document and return the root element."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    return etree.fromstring(xml, make_parser(recover))


def local_name(el: etree._Element) -> str:
    """Element tag without its namespace, e.g. ``{http://www.w3.org/2005/Atom}title`` -> ``title``."""
    tag = el.tag
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


def element_path(el: etree._Element) -> str:
    """Slash-joined local names from the document root down to *el*."""
    names = [local_name(el)]
    parent = el.getparent()
    while parent is not None:
        names.append(local_name(parent))
        parent = parent.getparent()
    return "/".join(reversed(names))


def iter_elements(
    source: Source,
    tags: Iterable[str] | None = None,
    recover: bool = False,
) -> Iterator[etree._Element]:
    """Stream elements from *source* as their end tags are reached.

    Args:
        source: File path, or a binary file-like object.
        tags: Local names to yield; every element when None.
        recover: If True, use lxml's recovery mode.

    Elements are yielded complete (children and text included) and stay
    intact until the caller asks for the next one. After that, when *tags*
    is given, a finished element is cleared and its earlier siblings are
    dropped, unless it sits inside a wanted element that hasn't ended yet.
    Memory then stays bounded by the largest wanted subtree. Malformed
    documents raise ``etree.XMLSyntaxError`` unless *recover* is set.
    """
    wanted = set(tags) if tags is not None else None
    context = etree.iterparse(source, events=("end",), recover=recover, **PARSER_OPTIONS)
    for _event, el in context:
        if not isinstance(el.tag, str):
            continue
        if wanted is None or local_name(el) in wanted:
            yield el
        if wanted is not None and not _inside_wanted(el, wanted):
            _discard(el)


def _inside_wanted(el: etree._Element, wanted: set[str]) -> bool:
    parent = el.getparent()
    while parent is not None:
        if local_name(parent) in wanted:
            return True
        parent = parent.getparent()
    return False


def _discard(el: etree._Element) -> None:
    """Free a consumed subtree; *el* stays attached, its content and earlier siblings go."""
    el.clear(keep_tail=True)
    parent = el.getparent()
    if parent is None:
        return
    while el.getprevious() is not None:
        del parent[0]


def inner_xml(el: etree._Element) -> str:
    """Return the raw, undecoded markup between *el*'s start and end tags.

    Character data comes back escaped the way lxml serializes it, and CDATA
    sections come back verbatim.
    """
    markup = etree.tostring(el, encoding="unicode", with_tail=False)
    # lxml escapes ">" inside attribute values, so the first one closes the start tag
    open_end = markup.find(">")
    if markup[open_end - 1] == "/":
        return ""
    close_start = markup.rfind("</")
    return markup[open_end + 1 : close_start]
