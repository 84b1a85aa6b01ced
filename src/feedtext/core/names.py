"""Split "Name (address)" style author strings found in RSS feeds.

Recognized layouts, tried in order:

1. ``address (Name)``  e.g. ``john@example.com (John Doe)``
2. ``Name (address)``  e.g. ``John Doe (john@example.com)``
3. ``Name``            no ``@`` and no parentheses
4. ``address``         exactly one ``@`` and no parentheses

Matching is purely syntactic; addresses are not validated.
"""

from __future__ import annotations

from typing import Callable, Optional

NameAddress = tuple[str, str]
Matcher = Callable[[str], Optional[NameAddress]]

_SPACE = " \t\n\r\f"


def _address_then_name(text: str) -> NameAddress | None:
    if not text.endswith(")"):
        return None
    at = text.find("@")
    if at < 1:
        return None
    # The address runs from the start up to the first whitespace after "@"
    ws = next((i for i in range(at + 1, len(text)) if text[i] in _SPACE), -1)
    if ws <= at + 1:
        return None
    rest = text[ws:].lstrip(_SPACE)
    if not rest.startswith("("):
        return None
    name = rest[1:-1]
    if not name or "@" in name:
        return None
    return name, text[:ws]


def _name_then_address(text: str) -> NameAddress | None:
    if not text.endswith(")"):
        return None
    at = text.find("@")
    if at == -1:
        return None
    domain = text[at + 1 : -1]
    if not domain or ")" in domain:
        return None

    # Rightmost "(" before the address that follows whitespace wins
    paren = text.rfind("(", 0, at)
    while paren != -1:
        if paren >= 2 and text[paren - 1] in _SPACE and paren + 1 < at:
            return text[: paren - 1].rstrip(_SPACE), text[paren + 1 : -1]
        paren = text.rfind("(", 0, paren)
    return None


def _name_only(text: str) -> NameAddress | None:
    if any(c in "@()" for c in text):
        return None
    return text, ""


def _address_only(text: str) -> NameAddress | None:
    if "(" in text or ")" in text or text.count("@") != 1:
        return None
    local, _, domain = text.partition("@")
    if not local or not domain:
        return None
    return "", text


MATCHERS: tuple[Matcher, ...] = (
    _address_then_name,
    _name_then_address,
    _name_only,
    _address_only,
)


def parse_name_address(text: str) -> NameAddress:
    """Return ``(name, address)`` parsed from *text*.

    Either element is ``""`` when absent; unrecognized input gives ``("", "")``.
    """
    if not text:
        return "", ""
    for attempt in MATCHERS:
        result = attempt(text)
        if result is not None:
            return result
    return "", ""
