"""
Configuration for Storefront Facets.

Holds the enumeration members every search zero-fills its counts over.
Config is declarative JSON - edit the file, not the code:

    {"colors": ["Red", "Blue"], "sizes": ["Small", "Large"]}

An omitted key means "every member of that enumeration".
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from .models import Color, Size


@dataclass(frozen=True)
class FacetConfig:
    """Facet members reported in every search result, in display order."""
    colors: tuple[Color, ...] = field(default_factory=lambda: tuple(Color))
    sizes: tuple[Size, ...] = field(default_factory=lambda: tuple(Size))

    def __post_init__(self):
        if not self.colors:
            raise ValueError("FacetConfig needs at least one color")
        if not self.sizes:
            raise ValueError("FacetConfig needs at least one size")
        # Normalize lists to tuples and drop repeats, keeping first position
        object.__setattr__(self, "colors", tuple(dict.fromkeys(self.colors)))
        object.__setattr__(self, "sizes", tuple(dict.fromkeys(self.sizes)))


DEFAULT_CONFIG = FacetConfig()


def load_config(config_path: str | Path) -> FacetConfig:
    """
    Load facet configuration from a JSON file.

    Args:
        config_path: Path to a facets config JSON file

    Returns:
        FacetConfig with the listed colors and sizes

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: on unknown color/size names or empty lists
    """
    path = Path(config_path)
    with open(path, "r") as f:
        data = json.load(f)

    colors = tuple(Color.parse(c) for c in data["colors"]) if "colors" in data else tuple(Color)
    sizes = tuple(Size.parse(s) for s in data["sizes"]) if "sizes" in data else tuple(Size)

    return FacetConfig(colors=colors, sizes=sizes)
