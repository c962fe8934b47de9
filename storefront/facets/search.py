"""
Facet Search - Query resolution over a CatalogIndex.

Filter modes, by which option lists are non-empty after de-duplication:

| Colors? | Sizes? | Buckets visited                                   |
|---------|--------|---------------------------------------------------|
| -       | -      | none (an empty filter matches nothing)            |
| yes     | -      | every size bucket of each wanted color            |
| -       | yes    | every color bucket of each wanted size            |
| yes     | yes    | colors x sizes, skipping pairs with no shirts     |

Every result carries a count for each configured color and size,
zero-filled for members nothing matched.
"""

import logging
from typing import Hashable, Iterable, TypeVar

from .config import FacetConfig
from .index import CatalogIndex, build_index
from .models import (
    ColorCount,
    MissingInputError,
    SearchOptions,
    SearchResults,
    Shirt,
    SizeCount,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def dedupe(values: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping the first occurrence's position."""
    return list(dict.fromkeys(values))


def search(index: CatalogIndex, options: SearchOptions) -> SearchResults:
    """
    Find shirts matching the options and count them per color and size.

    Args:
        index: Catalog built by build_index
        options: Wanted colors and sizes

    Returns:
        SearchResults with matches in bucket-visit order and complete counts

    Raises:
        MissingInputError: if options is None
    """
    if options is None:
        raise MissingInputError("options must not be None")

    colors = dedupe(options.colors)
    sizes = dedupe(options.sizes)

    matches = _collect_matches(index, colors, sizes)

    return SearchResults(
        shirts=matches,
        color_counts=_count_colors(matches, index.config),
        size_counts=_count_sizes(matches, index.config),
    )


def _collect_matches(index: CatalogIndex, colors: list, sizes: list) -> list[Shirt]:
    matches: list[Shirt] = []

    if not colors and not sizes:
        mode = "empty"
    elif not sizes:
        mode = "colors"
        for color in colors:
            for bucket in index.by_color.get(color, {}).values():
                matches.extend(bucket)
    elif not colors:
        mode = "sizes"
        for size in sizes:
            for bucket in index.by_size.get(size, {}).values():
                matches.extend(bucket)
    else:
        mode = "colors+sizes"
        for color in colors:
            for size in sizes:
                if not index.is_valid_combination(color, size):
                    continue
                matches.extend(index.by_color[color][size])

    logger.debug(
        "Search mode=%s colors=%s sizes=%s matched %d",
        mode, [c.value for c in colors], [s.value for s in sizes], len(matches),
    )
    return matches


def _count_colors(matches: list[Shirt], config: FacetConfig) -> list[ColorCount]:
    """Counts per observed color, then a zero for every other configured color."""
    observed: dict = {}
    for shirt in matches:
        observed[shirt.color] = observed.get(shirt.color, 0) + 1

    counts = [ColorCount(color=color, count=n) for color, n in observed.items()]
    for color in config.colors:
        if color not in observed:
            counts.append(ColorCount(color=color, count=0))
    return counts


def _count_sizes(matches: list[Shirt], config: FacetConfig) -> list[SizeCount]:
    """Counts per observed size, then a zero for every other configured size."""
    observed: dict = {}
    for shirt in matches:
        observed[shirt.size] = observed.get(shirt.size, 0) + 1

    counts = [SizeCount(size=size, count=n) for size, n in observed.items()]
    for size in config.sizes:
        if size not in observed:
            counts.append(SizeCount(size=size, count=0))
    return counts


def summarize_results(results: SearchResults) -> dict:
    """Summary statistics for a result, keyed by display value."""
    return {
        "total": results.total,
        "colors": {c.color.value: c.count for c in results.color_counts},
        "sizes": {s.size.value: s.count for s in results.size_counts},
        "colors_matched": sum(1 for c in results.color_counts if c.count),
        "sizes_matched": sum(1 for s in results.size_counts if s.count),
    }


class SearchEngine:
    """
    Index a shirt catalog once, then answer any number of searches.

    Searches never modify the index, so one engine can serve
    concurrent readers.
    """

    def __init__(self, shirts: list[Shirt], config: FacetConfig | None = None):
        self._index = build_index(shirts, config)

    @property
    def index(self) -> CatalogIndex:
        return self._index

    def search(self, options: SearchOptions) -> SearchResults:
        return search(self._index, options)
