"""
Catalog Index - Lookup structures for faceted shirt search.

Instead of scanning every shirt for every query, we bucket the catalog once:
- by_color: Color -> Size -> shirts (answers color filters and color+size pairs)
- by_size: Size -> Color -> shirts (the transpose, answers size-only filters)
- valid_combinations: (Color, Size) pairs that actually have shirts

The index is never mutated after build_index returns.
"""

import logging
from dataclasses import dataclass, field

from .config import DEFAULT_CONFIG, FacetConfig
from .models import Color, MissingInputError, Shirt, Size

logger = logging.getLogger(__name__)


@dataclass
class CatalogIndex:
    """
    Indexed shirt catalog.

    Attributes:
        by_color: Color -> Size -> list of Shirts, in catalog order
        by_size: Size -> Color -> list of Shirts, same buckets transposed
        valid_combinations: Every (Color, Size) pair with at least one shirt
        config: Facet members that search results are zero-filled over
        record_count: Total number of shirts indexed
    """
    by_color: dict[Color, dict[Size, list[Shirt]]] = field(default_factory=dict)
    by_size: dict[Size, dict[Color, list[Shirt]]] = field(default_factory=dict)
    valid_combinations: frozenset[tuple[Color, Size]] = frozenset()
    config: FacetConfig = DEFAULT_CONFIG
    record_count: int = 0

    def bucket(self, color: Color, size: Size) -> list[Shirt]:
        """Copy of the shirts of exactly this color and size (empty if none)."""
        return list(self.by_color.get(color, {}).get(size, []))

    def is_valid_combination(self, color: Color, size: Size) -> bool:
        return (color, size) in self.valid_combinations

    def colors_present(self) -> list[Color]:
        return list(self.by_color.keys())

    def sizes_present(self) -> list[Size]:
        return list(self.by_size.keys())


def build_index(shirts: list[Shirt], config: FacetConfig | None = None) -> CatalogIndex:
    """
    Build lookup index from a shirt catalog.

    Args:
        shirts: Shirts from the catalog loader (may be empty)
        config: Facet members to report; defaults to every Color and Size

    Returns:
        CatalogIndex with color-major and size-major buckets

    Raises:
        MissingInputError: if shirts is None
    """
    if shirts is None:
        raise MissingInputError("shirts must not be None")

    index = CatalogIndex(config=config or DEFAULT_CONFIG)

    # Pass 1: color -> size -> shirts
    count = 0
    for shirt in shirts:
        sizes = index.by_color.setdefault(shirt.color, {})
        sizes.setdefault(shirt.size, []).append(shirt)
        count += 1

    # Pass 2: transpose. Same list objects, so the two views cannot drift.
    for color, sizes in index.by_color.items():
        for size, bucket in sizes.items():
            index.by_size.setdefault(size, {})[color] = bucket

    # Pass 3: pairs that actually occur
    combinations = set()
    for color, sizes in index.by_color.items():
        for size in sizes:
            combinations.add((color, size))
    index.valid_combinations = frozenset(combinations)

    index.record_count = count
    logger.debug(
        "Indexed %d shirts into %d color/size combinations",
        count, len(index.valid_combinations),
    )
    return index
