"""
Sample catalog generation for demos and scale tests.

Same seed, same shirts: ids come from the seeded RNG too, so two builders
with one seed produce equal catalogs.
"""

import random
import uuid
from typing import Optional

from .config import DEFAULT_CONFIG, FacetConfig
from .models import Shirt


class SampleDataBuilder:
    """Build a random shirt catalog drawn from the configured colors and sizes."""

    def __init__(self, count: int, seed: Optional[int] = None, config: Optional[FacetConfig] = None):
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._count = count
        self._config = config or DEFAULT_CONFIG
        self._random = random.Random(seed)

    def create_shirts(self) -> list[Shirt]:
        shirts = []
        for _ in range(self._count):
            color = self._random.choice(self._config.colors)
            size = self._random.choice(self._config.sizes)
            shirts.append(Shirt(
                id=uuid.UUID(int=self._random.getrandbits(128), version=4),
                name=f"{color.value} - {size.value}",
                size=size,
                color=color,
            ))
        return shirts
