"""
Facet search API router.
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query

from backend.api.models import SearchResponse, StatusResponse
from backend.core.config import settings
from storefront.facets import (
    Color, Size, SearchOptions, SearchEngine,
    DEFAULT_CONFIG, load_config, load_catalog, SampleDataBuilder,
)

router = APIRouter(prefix="/api/facets", tags=["Facets"])
logger = logging.getLogger(__name__)

# Global state for the search engine (built on first use)
_facets_state = {
    "engine": None,
    "initialized": False,
}


def _init_facets() -> bool:
    """Build the search engine if not already done."""
    if _facets_state["initialized"]:
        return True

    try:
        config = load_config(settings.CONFIG_PATH) if settings.CONFIG_PATH else DEFAULT_CONFIG

        if settings.CATALOG_PATH:
            shirts = load_catalog(settings.CATALOG_PATH)
        else:
            shirts = SampleDataBuilder(
                settings.SAMPLE_SIZE, seed=settings.SAMPLE_SEED, config=config
            ).create_shirts()

        _facets_state["engine"] = SearchEngine(shirts, config)
        _facets_state["initialized"] = True
        logger.info(f"Facet search ready with {len(shirts)} shirts")
        return True
    except (FileNotFoundError, ValueError) as e:
        logger.warning(f"Failed to initialize facet search: {e}")
        return False


def _get_engine() -> SearchEngine:
    if not _init_facets():
        raise HTTPException(status_code=503, detail="Facet search not available. Catalog not loaded.")
    return _facets_state["engine"]


@router.get("/search", response_model=SearchResponse)
def search_facets(
    color: List[Color] = Query([]),
    size: List[Size] = Query([]),
):
    """
    Search shirts by color and size.

    Repeat a parameter to ask for several values (?color=Red&color=Blue).
    With neither parameter nothing matches, but every facet count is
    still returned.
    """
    engine = _get_engine()
    results = engine.search(SearchOptions(colors=color, sizes=size))
    return SearchResponse.from_results(results)


@router.get("/status", response_model=StatusResponse)
def facets_status():
    """Get facet search status."""
    _init_facets()

    engine = _facets_state.get("engine")
    index = engine.index if engine else None

    return StatusResponse(
        initialized=_facets_state["initialized"],
        record_count=index.record_count if index else 0,
        combinations=len(index.valid_combinations) if index else 0,
        colors=list(index.config.colors) if index else [],
        sizes=list(index.config.sizes) if index else [],
    )
