"""
Pydantic response models for the API.
"""
from pydantic import BaseModel
from typing import List

from storefront.facets import Color, SearchResults, Size


# ============== Facet Search ==============

class ShirtResponse(BaseModel):
    id: str
    name: str
    color: Color
    size: Size


class ColorCountResponse(BaseModel):
    color: Color
    count: int


class SizeCountResponse(BaseModel):
    size: Size
    count: int


class SearchResponse(BaseModel):
    shirts: List[ShirtResponse]
    color_counts: List[ColorCountResponse]
    size_counts: List[SizeCountResponse]
    total: int

    @classmethod
    def from_results(cls, results: SearchResults) -> "SearchResponse":
        return cls(
            shirts=[
                ShirtResponse(id=str(s.id), name=s.name, color=s.color, size=s.size)
                for s in results.shirts
            ],
            color_counts=[ColorCountResponse(color=c.color, count=c.count) for c in results.color_counts],
            size_counts=[SizeCountResponse(size=s.size, count=s.count) for s in results.size_counts],
            total=results.total,
        )


class StatusResponse(BaseModel):
    initialized: bool
    record_count: int
    combinations: int
    colors: List[Color]
    sizes: List[Size]
