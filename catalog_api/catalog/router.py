"""
Route definitions for the product catalogue API.

Endpoints under /api/v1:
- GET  /products  : filtered, sorted, paginated list of products

Recognised query parameters: ``categories`` (comma separated),
``price_min``, ``price_max``, ``star_min``, ``star_max``, ``sort``
(name|price|stars), ``order`` (asc|desc), ``limit`` and ``offset``
(``offset`` is a page index, not an item index).
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from ..errors import QueryValidationError, RateLimitExceeded
from ..rate_limit import FixedWindowRateLimiter, get_rate_limiter
from .query import parse_query_params, validate_query_params
from .schemas import Product
from .store import get_catalog, search_products


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/products", response_model=List[Product])
def list_products(
    request: Request,
    products: List[Product] = Depends(get_catalog),
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> List[Product]:
    """
    Returns one page of the catalogue.

    Steps:
    1) Rate limit check, before anything is parsed.
    2) Parse the raw query string, then validate it into FilterCriteria.
    3) Filter, sort, then slice the requested page.
    """
    if not limiter.allow():
        raise RateLimitExceeded()

    params = parse_query_params(request.query_params)
    try:
        criteria = validate_query_params(params)
    except QueryValidationError as exc:
        logger.debug("Rejected query %r: %s", str(request.query_params), exc)
        raise

    return search_products(products, criteria)
