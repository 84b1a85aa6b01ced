"""Exceptions raised while decoding feed text."""

from __future__ import annotations


class EntityError(ValueError):
    """Base class for references that are well-formed but cannot be resolved."""


class InvalidNumericReference(EntityError):
    """Digits of a numeric character reference don't parse in the declared base."""

    def __init__(self, reference: str = ""):
        self.reference = reference
        super().__init__(f"invalid numeric reference &{reference};" if reference else "invalid numeric reference")


class UnknownEntity(EntityError):
    """A named reference outside the predefined XML entity set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown predefined entity &{name};")


class TruncatedEntity(EntityError):
    """Reserved. Unterminated references are passed through literally instead."""

    def __init__(self, fragment: str = ""):
        self.fragment = fragment
        super().__init__("truncated entity")
