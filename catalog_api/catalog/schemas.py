"""
Pydantic schema definitions for the catalog module.

The ``Product`` model is what the ``/api/v1/products`` endpoint returns
for every entry on a page. ``QueryParams`` holds the query string as it
arrived (strings, still unchecked) and ``FilterCriteria`` is the typed,
validated form consumed by the filter, sort and pagination steps.

The vocabulary of categories, the sortable fields and the default bounds
are defined here so that the parser, the validator and the store agree
on them.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal  # Py3.8 compatibility


CATEGORY_VOCABULARY = (
    "electronics",
    "apparel",
    "home goods",
    "sports",
    "beauty",
    "grocery",
    "office supplies",
    "outdoor",
    "toys",
    "health",
    "automotive",
    "luxury",
    "books",
)

SORTABLE_FIELDS = ("name", "price", "stars")

# Wire values of ``order`` mapped to the sort direction they select.
SORT_ORDERS = {"asc": "ascending", "desc": "descending"}

DEFAULT_LIMIT = 3
DEFAULT_OFFSET = 0
DEFAULT_SORT_FIELD = "name"
DEFAULT_ORDER = "asc"

# Upper bounds used when the client gives no maximum. No catalog entry
# goes beyond either of them.
PRICE_MAX_SENTINEL = 4294967295
STARS_MAX_SENTINEL = 500

SortField = Literal["name", "price", "stars"]
SortOrder = Literal["ascending", "descending"]


class Product(BaseModel):
    """A single catalogue entry.

    Products are loaded once from the bundled dataset and never change,
    hence the model is frozen. ``price`` is an integer amount (no
    fractional values anywhere in the system) and ``stars`` is an
    opaque ranking score rather than a 0-5 rating.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: int = Field(ge=0)
    stars: int = Field(ge=0)
    categories: List[str] = Field(default_factory=list)


class QueryParams(BaseModel):
    """Raw query string values, as produced by the parser.

    Every field except ``categories`` is the untouched string from the
    request, or ``None`` when the parameter was not supplied. Nothing
    here has been checked yet.
    """

    categories: List[str] = Field(default_factory=list)
    price_min: Optional[str] = None
    price_max: Optional[str] = None
    star_min: Optional[str] = None
    star_max: Optional[str] = None
    sort: str = DEFAULT_SORT_FIELD
    order: str = DEFAULT_ORDER
    limit: Optional[str] = None
    offset: Optional[str] = None


class FilterCriteria(BaseModel):
    """Validated filter, sort and page settings for one request."""

    categories: List[str] = Field(default_factory=list)
    min_price: int = 0
    max_price: int = PRICE_MAX_SENTINEL
    min_stars: int = 0
    max_stars: int = STARS_MAX_SENTINEL
    sort_field: SortField = DEFAULT_SORT_FIELD
    sort_order: SortOrder = "ascending"
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
