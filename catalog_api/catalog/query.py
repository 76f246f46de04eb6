"""
Query string parsing and validation for ``/api/v1/products``.

Parsing and validation are two separate steps:

* ``parse_query_params()`` copies the recognised keys out of the raw
  query mapping into a ``QueryParams``. It splits and decodes the
  ``categories`` list but never rejects anything.

* ``validate_query_params()`` checks a ``QueryParams`` and returns the
  typed ``FilterCriteria``. The first failing check raises
  ``QueryValidationError``; the client is never told which parameter
  was wrong.
"""

from __future__ import annotations

import re
import urllib.parse
from typing import List, Mapping, Optional, Tuple

from ..errors import QueryValidationError
from .schemas import (
    CATEGORY_VOCABULARY,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_ORDER,
    DEFAULT_SORT_FIELD,
    PRICE_MAX_SENTINEL,
    SORT_ORDERS,
    SORTABLE_FIELDS,
    STARS_MAX_SENTINEL,
    FilterCriteria,
    QueryParams,
)


# Digits only: no sign, no decimal point, no exponent, no whitespace.
_UNSIGNED_INT = re.compile(r"[0-9]+")
_SIGNED_INT = re.compile(r"-?[0-9]+")


def _value(query: Mapping[str, str], key: str) -> Optional[str]:
    """Return the raw value for ``key``, or ``None`` when absent or empty."""
    value = query.get(key)
    if value is None or value == "":
        return None
    return value


def _split_categories(raw: str) -> List[str]:
    # Literal "%20" is turned into a space before decoding so that
    # double-encoded spaces ("home%2520goods") still resolve.
    return [urllib.parse.unquote(token.replace("%20", " ")) for token in raw.split(",")]


def parse_query_params(query: Mapping[str, str]) -> QueryParams:
    """Build a ``QueryParams`` from the raw query string mapping.

    Parameters
    ----------
    query : Mapping[str, str]
        Query string keys and their (already URL-decoded) values, e.g.
        ``request.query_params``.

    Returns
    -------
    QueryParams
        Raw values for every recognised key. ``categories`` is split on
        commas with order and duplicates preserved; the other fields are
        the untouched strings, or ``None`` when not supplied.
    """
    categories = _value(query, "categories")
    return QueryParams(
        categories=_split_categories(categories) if categories is not None else [],
        price_min=_value(query, "price_min"),
        price_max=_value(query, "price_max"),
        star_min=_value(query, "star_min"),
        star_max=_value(query, "star_max"),
        sort=_value(query, "sort") or DEFAULT_SORT_FIELD,
        order=_value(query, "order") or DEFAULT_ORDER,
        limit=_value(query, "limit"),
        offset=_value(query, "offset"),
    )


def _to_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        # Digit strings past the interpreter's conversion limit (4300 digits).
        raise QueryValidationError(f"{name} has too many digits") from None


def _page_value(raw: Optional[str], default: int, name: str) -> int:
    # Stricter than a lenient integer parse: "1.5" or "3abc" is rejected
    # rather than truncated to a page size.
    if raw is None:
        return default
    if not _SIGNED_INT.fullmatch(raw):
        raise QueryValidationError(f"{name} is not an integer: {raw!r}")
    value = _to_int(raw, name)
    if value < 0:
        raise QueryValidationError(f"{name} is negative: {value}")
    return value


def _bound(raw: Optional[str], default: int, name: str) -> int:
    if raw is None:
        return default
    if not _UNSIGNED_INT.fullmatch(raw):
        raise QueryValidationError(f"{name} is not an unsigned integer: {raw!r}")
    return _to_int(raw, name)


def _range(
    raw_min: Optional[str], raw_max: Optional[str], ceiling: int, name: str
) -> Tuple[int, int]:
    low = _bound(raw_min, 0, f"{name}_min")
    high = _bound(raw_max, ceiling, f"{name}_max")
    if low > high:
        raise QueryValidationError(f"{name} range is inverted: {low} > {high}")
    return low, high


def validate_query_params(params: QueryParams) -> FilterCriteria:
    """Check ``params`` and convert them into ``FilterCriteria``.

    Checks run in a fixed order: page settings, categories, price range,
    star range, sort order, sort field. Missing bounds take the floor of
    0 and the sentinel maxima.

    Raises
    ------
    QueryValidationError
        On the first check that fails.
    """
    limit = _page_value(params.limit, DEFAULT_LIMIT, "limit")
    offset = _page_value(params.offset, DEFAULT_OFFSET, "offset")

    for category in params.categories:
        if category not in CATEGORY_VOCABULARY:
            raise QueryValidationError(f"unknown category: {category!r}")

    min_price, max_price = _range(
        params.price_min, params.price_max, PRICE_MAX_SENTINEL, "price"
    )
    min_stars, max_stars = _range(
        params.star_min, params.star_max, STARS_MAX_SENTINEL, "star"
    )

    if params.order not in SORT_ORDERS:
        raise QueryValidationError(f"unknown sort order: {params.order!r}")
    if params.sort not in SORTABLE_FIELDS:
        raise QueryValidationError(f"unknown sort field: {params.sort!r}")

    return FilterCriteria(
        categories=list(params.categories),
        min_price=min_price,
        max_price=max_price,
        min_stars=min_stars,
        max_stars=max_stars,
        sort_field=params.sort,
        sort_order=SORT_ORDERS[params.order],
        limit=limit,
        offset=offset,
    )
