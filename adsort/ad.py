"""Super Bowl advertisement records and the content flags they carry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Content(Enum):
    """A kind of content an advertisement may contain, numbered as in the menu."""

    FUNNY = 1
    PRODUCT = 2
    PATRIOTIC = 3
    CELEBRITY = 4
    DANGER = 5
    ANIMALS = 6
    SEXUAL = 7

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Funny"``."""
        return self.name.capitalize()

    @property
    def field_name(self) -> str:
        """Name of the matching attribute on :class:`ContentFlags`."""
        return self.name.lower()


@dataclass(frozen=True)
class ContentFlags:
    """Which kinds of content an advertisement contains."""

    funny: bool = False
    product: bool = False
    patriotic: bool = False
    celebrity: bool = False
    danger: bool = False
    animals: bool = False
    sexual: bool = False

    def has(self, content: Content) -> bool:
        """Return whether the given kind of content is present."""
        return bool(getattr(self, content.field_name))

    def describe(self) -> str:
        """List the present kinds of content, or ``"(none)"`` if there are none."""
        parts = [content.label for content in Content if self.has(content)]
        return ", ".join(parts) if parts else "(none)"

    def matches(self, wanted: Iterable[Content]) -> bool:
        """Return whether every wanted kind of content is present."""
        return all(self.has(content) for content in wanted)


@dataclass(frozen=True)
class Ad:
    """One Super Bowl advertisement."""

    year: int = 0
    brand: str = ""
    content: ContentFlags = field(default_factory=ContentFlags)
    views: int = 0
    likes: int = 0
    dislikes: int = 0
    title: str = ""