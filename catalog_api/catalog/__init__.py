"""
Catalog package for the product catalogue API.

This package turns the query string of ``GET /api/v1/products`` into
typed criteria (``query``), applies them to the in-memory product list
(``store``) and exposes the route (``router``). Schemas shared by these
modules live in ``schemas``.
"""

from .router import router as catalog_router  # noqa: F401
