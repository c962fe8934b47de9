"""
Tests for the catalog index.

Run with: pytest storefront/facets/tests/test_index.py -v
"""

import uuid

import pytest

from storefront.facets.config import DEFAULT_CONFIG, FacetConfig
from storefront.facets.index import build_index, CatalogIndex
from storefront.facets.models import Color, Size, Shirt, MissingInputError
from storefront.facets.sample_data import SampleDataBuilder


def make_shirt(color: Color, size: Size, name: str = "") -> Shirt:
    return Shirt(id=uuid.uuid4(), name=name or f"{color.value} - {size.value}", size=size, color=color)


@pytest.fixture
def shirts():
    return [
        make_shirt(Color.RED, Size.SMALL, "first red small"),
        make_shirt(Color.BLACK, Size.MEDIUM),
        make_shirt(Color.RED, Size.SMALL, "second red small"),
        make_shirt(Color.RED, Size.LARGE),
        make_shirt(Color.WHITE, Size.LARGE),
    ]


@pytest.fixture
def index(shirts):
    return build_index(shirts)


class TestBuildIndex:

    def test_record_count(self, index):
        assert index.record_count == 5

    def test_color_buckets(self, index, shirts):
        assert set(index.by_color) == {Color.RED, Color.BLACK, Color.WHITE}
        assert index.by_color[Color.RED][Size.SMALL] == [shirts[0], shirts[2]]
        assert index.by_color[Color.RED][Size.LARGE] == [shirts[3]]
        assert Size.MEDIUM not in index.by_color[Color.RED]

    def test_bucket_keeps_catalog_order(self, index):
        names = [s.name for s in index.bucket(Color.RED, Size.SMALL)]
        assert names == ["first red small", "second red small"]

    def test_size_buckets_are_transpose(self, index):
        for color, sizes in index.by_color.items():
            for size, bucket in sizes.items():
                assert index.by_size[size][color] == bucket

        for size, colors in index.by_size.items():
            for color, bucket in colors.items():
                assert index.by_color[color][size] == bucket

    def test_each_shirt_in_one_bucket(self, index, shirts):
        color_view = [s for sizes in index.by_color.values() for b in sizes.values() for s in b]
        size_view = [s for colors in index.by_size.values() for b in colors.values() for s in b]

        assert sorted(s.id.int for s in color_view) == sorted(s.id.int for s in shirts)
        assert sorted(s.id.int for s in size_view) == sorted(s.id.int for s in shirts)

    def test_valid_combinations(self, index):
        assert index.valid_combinations == {
            (Color.RED, Size.SMALL),
            (Color.BLACK, Size.MEDIUM),
            (Color.RED, Size.LARGE),
            (Color.WHITE, Size.LARGE),
        }

    def test_is_valid_combination(self, index):
        assert index.is_valid_combination(Color.RED, Size.LARGE)
        assert not index.is_valid_combination(Color.RED, Size.MEDIUM)
        assert not index.is_valid_combination(Color.BLUE, Size.SMALL)

    def test_bucket_missing_pair(self, index):
        assert index.bucket(Color.BLUE, Size.SMALL) == []
        assert index.bucket(Color.RED, Size.MEDIUM) == []

    def test_bucket_is_a_copy(self, index):
        bucket = index.bucket(Color.RED, Size.SMALL)
        bucket.clear()

        assert len(index.bucket(Color.RED, Size.SMALL)) == 2
        assert len(index.by_size[Size.SMALL][Color.RED]) == 2
        assert index.record_count == 5

    def test_present_values(self, index):
        assert index.colors_present() == [Color.RED, Color.BLACK, Color.WHITE]
        assert set(index.sizes_present()) == {Size.SMALL, Size.MEDIUM, Size.LARGE}

    def test_default_config(self, index):
        assert index.config == DEFAULT_CONFIG

    def test_custom_config(self, shirts):
        config = FacetConfig(colors=(Color.RED,), sizes=(Size.SMALL,))
        assert build_index(shirts, config).config is config


class TestBuildIndexEdgeCases:

    def test_empty_catalog(self):
        index = build_index([])

        assert index.record_count == 0
        assert index.by_color == {}
        assert index.by_size == {}
        assert index.valid_combinations == frozenset()

    def test_none_rejected(self):
        with pytest.raises(MissingInputError):
            build_index(None)

    def test_accepts_any_iterable(self, shirts):
        index = build_index(tuple(shirts))
        assert index.record_count == len(shirts)

    def test_does_not_modify_input(self, shirts):
        snapshot = list(shirts)
        build_index(shirts)
        assert shirts == snapshot

    def test_deterministic(self, shirts):
        assert build_index(shirts) == build_index(shirts)

    def test_combinations_match_sample_data(self):
        shirts = SampleDataBuilder(500, seed=99).create_shirts()
        index = build_index(shirts)

        assert index.valid_combinations == {(s.color, s.size) for s in shirts}
        assert index.record_count == 500

    def test_default_dataclass(self):
        index = CatalogIndex()
        assert index.record_count == 0
        assert index.bucket(Color.RED, Size.SMALL) == []
