"""Results of extracting text fields and people from a feed document."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class TextField:
    """Decoded text of one element, e.g. an item title."""

    path: str  # slash-joined local names, e.g. rss/channel/item/title
    tag: str
    type: str = "text"  # Atom text construct type: text, html, xhtml
    text: str = ""
    error: str = ""  # set when decoding failed; text is then empty


@dataclass
class Person:
    """An author/contributor split into name and address."""

    path: str
    tag: str
    name: str = ""
    address: str = ""


@dataclass
class FeedText:
    """Everything extracted from a single feed document."""

    source: str
    fields: list[TextField] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)

    @property
    def errors(self) -> list[TextField]:
        return [f for f in self.fields if f.error]

    def to_dict(self) -> dict:
        return asdict(self)
