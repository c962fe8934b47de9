"""
Data models for Storefront Facets.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Shirts are frozen: once loaded they are shared read-only between the
caller's list and every index bucket that references them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import UUID


class MissingInputError(ValueError):
    """Raised when a required input (shirt list, search options) is None."""


class Color(Enum):
    """Closed set of shirt colors."""
    RED = "Red"
    BLUE = "Blue"
    YELLOW = "Yellow"
    WHITE = "White"
    BLACK = "Black"

    @classmethod
    def parse(cls, raw: str) -> "Color":
        """Parse a color by value or member name, case-insensitive."""
        return _parse_member(cls, raw)


class Size(Enum):
    """Closed set of shirt sizes."""
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @classmethod
    def parse(cls, raw: str) -> "Size":
        """Parse a size by value or member name, case-insensitive."""
        return _parse_member(cls, raw)


def _parse_member(enum_cls, raw):
    if isinstance(raw, enum_cls):
        return raw
    key = str(raw).strip().lower()
    for member in enum_cls:
        if key in (member.value.lower(), member.name.lower()):
            return member
    raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {raw!r}")


@dataclass(frozen=True)
class Shirt:
    """
    A single catalog item.

    Identity is the id; name is for display only.
    """
    id: UUID
    name: str
    size: Size
    color: Color


@dataclass
class SearchOptions:
    """Wanted colors and sizes. Either list may be empty or hold duplicates."""
    colors: list[Color] = field(default_factory=list)
    sizes: list[Size] = field(default_factory=list)


@dataclass(frozen=True)
class ColorCount:
    color: Color
    count: int


@dataclass(frozen=True)
class SizeCount:
    size: Size
    count: int


@dataclass
class SearchResults:
    """
    Output of a search.

    color_counts and size_counts hold exactly one entry per configured
    enumeration member, zero where nothing matched.
    """
    shirts: list[Shirt] = field(default_factory=list)
    color_counts: list[ColorCount] = field(default_factory=list)
    size_counts: list[SizeCount] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.shirts)

    def color_count_map(self) -> dict[Color, int]:
        return {c.color: c.count for c in self.color_counts}

    def size_count_map(self) -> dict[Size, int]:
        return {s.size: s.count for s in self.size_counts}

    def count_for(self, value: Color | Size) -> Optional[int]:
        """Count for a single color or size, None if it is not a facet here."""
        if isinstance(value, Color):
            return self.color_count_map().get(value)
        return self.size_count_map().get(value)
