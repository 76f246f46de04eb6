"""
Product catalogue and the filter/sort/paginate steps applied to it.

The ``PRODUCTS`` list is populated at import time from the bundled
dataset (``data/products.json``, or the file named by
``CATALOG_DATA_FILE``). It is never modified afterwards: the functions
below build new lists rather than touching it.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from ..config import CATALOG_DATA_FILE
from .schemas import FilterCriteria, Product


logger = logging.getLogger(__name__)


def load_products(path: Path = CATALOG_DATA_FILE) -> List[Product]:
    """Load the catalogue from a JSON file.

    Parameters
    ----------
    path : Path
        A JSON array of objects with ``name``, ``price``, ``stars`` and
        ``categories`` keys.

    Returns
    -------
    List[Product]
        The products in file order.

    Raises
    ------
    OSError, ValueError
        When the file is missing, is not valid JSON or an entry does not
        fit the ``Product`` schema. The service cannot run without a
        catalogue, so nothing is swallowed here.
    """
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON array of products")
    products = [Product(**entry) for entry in raw]
    logger.info("Loaded %d products from %s", len(products), path)
    return products


# In-memory catalogue shared by every request.
PRODUCTS: List[Product] = load_products()


def get_catalog() -> List[Product]:
    """FastAPI dependency returning the catalogue."""
    return PRODUCTS


def _name_key(name: str) -> Tuple[str, str, str]:
    """Locale-style sort key for product names.

    Case and accents only decide the order between names that are
    otherwise equal, so "apple" sorts next to "Apple" and "éclair" next
    to "eclair". Between names differing only in case, lowercase comes
    first.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), name.casefold(), name.swapcase())


_SORT_KEYS: Dict[str, Callable[[Product], object]] = {
    "name": lambda p: _name_key(p.name),
    "price": lambda p: p.price,
    "stars": lambda p: p.stars,
}


def _matches(product: Product, criteria: FilterCriteria) -> bool:
    # An empty category list means "every category".
    if criteria.categories and not any(
        c in criteria.categories for c in product.categories
    ):
        return False
    if not criteria.min_price <= product.price <= criteria.max_price:
        return False
    if not criteria.min_stars <= product.stars <= criteria.max_stars:
        return False
    return True


def filter_products(
    products: Sequence[Product], criteria: FilterCriteria
) -> List[Product]:
    """Return the products that satisfy every filter in ``criteria``.

    A product passes when at least one of its categories was requested
    (or no categories were requested), and its price and stars lie
    within the inclusive bounds. Catalogue order is kept.
    """
    return [p for p in products if _matches(p, criteria)]


def sort_products(
    products: Sequence[Product], field: str, order: str = "ascending"
) -> List[Product]:
    """Return ``products`` sorted by ``field`` in the given direction.

    ``price`` and ``stars`` compare numerically, ``name`` with a
    case- and accent-insensitive key. The sort is stable in both
    directions: products with equal keys keep their incoming order.
    """
    key = _SORT_KEYS[field]
    return sorted(products, key=key, reverse=(order == "descending"))


def paginate(products: Sequence[Product], limit: int, offset: int) -> List[Product]:
    """Return page number ``offset`` (0-indexed) of size ``limit``.

    ``offset`` counts pages, not items: ``offset=2, limit=3`` yields the
    items at positions 6, 7 and 8. Pages beyond the end are empty.
    """
    start = offset * limit
    end = start + limit
    return list(products[start:end])


def search_products(
    products: Sequence[Product], criteria: FilterCriteria
) -> List[Product]:
    """Filter, sort and paginate ``products`` according to ``criteria``."""
    items = filter_products(products, criteria)
    items = sort_products(items, criteria.sort_field, criteria.sort_order)
    return paginate(items, criteria.limit, criteria.offset)
