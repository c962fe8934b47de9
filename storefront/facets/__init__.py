# Storefront Facets: faceted shirt search over an immutable in-memory catalog

from .models import (
    Color,
    Size,
    Shirt,
    SearchOptions,
    SearchResults,
    ColorCount,
    SizeCount,
    MissingInputError,
)
from .config import FacetConfig, DEFAULT_CONFIG, load_config
from .index import build_index, CatalogIndex
from .search import search, dedupe, summarize_results, SearchEngine
from .loader import load_catalog
from .sample_data import SampleDataBuilder
from .report import format_console, export_csv, export_counts_csv

__version__ = "1.0.0"

__all__ = [
    # Models
    "Color",
    "Size",
    "Shirt",
    "SearchOptions",
    "SearchResults",
    "ColorCount",
    "SizeCount",
    "MissingInputError",
    # Config
    "FacetConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Index
    "build_index",
    "CatalogIndex",
    # Search
    "search",
    "dedupe",
    "summarize_results",
    "SearchEngine",
    # Catalog
    "load_catalog",
    "SampleDataBuilder",
    # Report
    "format_console",
    "export_csv",
    "export_counts_csv",
]
