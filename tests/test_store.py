"""Unit tests for catalogue loading, filtering, sorting and pagination."""

import json

import pytest
from pydantic import ValidationError

from catalog_api.catalog.schemas import FilterCriteria, Product
from catalog_api.catalog.store import (
    PRODUCTS,
    filter_products,
    load_products,
    paginate,
    search_products,
    sort_products,
)


def product(name, price=100, stars=10, categories=("toys",)):
    return Product(name=name, price=price, stars=stars, categories=list(categories))


@pytest.fixture
def sample():
    return [
        product("Banana", price=300, stars=20, categories=["grocery"]),
        product("apple", price=100, stars=50, categories=["grocery", "health"]),
        product("Cherry", price=300, stars=5, categories=["grocery", "luxury"]),
        product("Drone", price=90000, stars=400, categories=["electronics", "toys"]),
        product("Éclair", price=250, stars=20, categories=["grocery"]),
    ]


def names(products):
    return [p.name for p in products]


#
# Loading
#

def test_bundled_catalogue_is_loaded():
    assert len(PRODUCTS) > 0
    assert all(isinstance(p, Product) for p in PRODUCTS)
    assert len({p.name for p in PRODUCTS}) == len(PRODUCTS)


def test_load_products_reads_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps([{"name": "Kite", "price": 500, "stars": 12, "categories": ["toys"]}]),
        encoding="utf-8",
    )
    assert load_products(path) == [product("Kite", price=500, stars=12)]


def test_load_products_rejects_non_list(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"name": "Kite"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_products(path)


def test_load_products_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_products(tmp_path / "missing.json")


def test_products_are_immutable():
    with pytest.raises(ValidationError):
        PRODUCTS[0].price = 1


#
# Filtering
#

def test_no_filters_keeps_everything_in_order(sample):
    assert filter_products(sample, FilterCriteria()) == sample


def test_category_filter_is_an_or(sample):
    result = filter_products(sample, FilterCriteria(categories=["health", "electronics"]))
    assert names(result) == ["apple", "Drone"]


def test_category_without_matches(sample):
    assert filter_products(sample, FilterCriteria(categories=["books"])) == []


def test_price_bounds_are_inclusive(sample):
    result = filter_products(sample, FilterCriteria(min_price=250, max_price=300))
    assert names(result) == ["Banana", "Cherry", "Éclair"]


def test_star_bounds_are_inclusive(sample):
    result = filter_products(sample, FilterCriteria(min_stars=20, max_stars=20))
    assert names(result) == ["Banana", "Éclair"]


def test_all_filters_combine(sample):
    criteria = FilterCriteria(categories=["grocery"], max_price=300, min_stars=10)
    assert names(filter_products(sample, criteria)) == ["Banana", "apple", "Éclair"]


def test_filter_does_not_modify_input(sample):
    before = list(sample)
    filter_products(sample, FilterCriteria(categories=["toys"]))
    assert sample == before


#
# Sorting
#

def test_sort_by_name_ignores_case_and_accents(sample):
    assert names(sort_products(sample, "name")) == [
        "apple",
        "Banana",
        "Cherry",
        "Drone",
        "Éclair",
    ]


def test_sort_by_name_puts_lowercase_first_on_case_ties():
    items = [product("Apple"), product("apple"), product("APPLE")]
    assert names(sort_products(items, "name")) == ["apple", "Apple", "APPLE"]


def test_sort_by_name_descending(sample):
    assert names(sort_products(sample, "name", "descending")) == [
        "Éclair",
        "Drone",
        "Cherry",
        "Banana",
        "apple",
    ]


def test_sort_by_price_is_numeric(sample):
    prices = [p.price for p in sort_products(sample, "price")]
    assert prices == [100, 250, 300, 300, 90000]


def test_sort_by_stars_descending(sample):
    stars = [p.stars for p in sort_products(sample, "stars", "descending")]
    assert stars == [400, 50, 20, 20, 5]


def test_sort_is_stable_ascending(sample):
    result = sort_products(sample, "price")
    assert names(result)[2:4] == ["Banana", "Cherry"]


def test_sort_is_stable_descending(sample):
    result = sort_products(sample, "stars", "descending")
    assert names(result)[2:4] == ["Banana", "Éclair"]


def test_sort_returns_new_list(sample):
    before = list(sample)
    result = sort_products(sample, "price", "descending")
    assert result is not sample
    assert sample == before


#
# Pagination
#

@pytest.mark.parametrize(
    "limit, offset, expected",
    [
        (3, 0, [0, 1, 2]),
        (3, 1, [3, 4, 5]),
        (3, 2, [6, 7, 8]),
        (2, 4, [8, 9]),
        (3, 4, []),
        (0, 0, []),
        (0, 5, []),
        (20, 0, list(range(10))),
    ],
)
def test_offset_counts_pages(limit, offset, expected):
    assert paginate(list(range(10)), limit, offset) == expected


#
# Whole pipeline
#

def test_search_products_filters_sorts_and_pages(sample):
    criteria = FilterCriteria(
        categories=["grocery"],
        sort_field="price",
        sort_order="descending",
        limit=2,
        offset=1,
    )
    # grocery by price desc: Banana 300, Cherry 300, Éclair 250, apple 100
    assert names(search_products(sample, criteria)) == ["Éclair", "apple"]
