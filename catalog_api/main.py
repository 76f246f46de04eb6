# catalog_api/main.py
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .logger import logger  # configure logging before the catalogue loads
from . import __version__
from .config import HOST, PORT
from .catalog import catalog_router
from .errors import CatalogAPIError


app = FastAPI(
    title="Product Catalog API",
    description=(
        "Read-only product catalogue with category, price and star "
        "filters, sorting and page-based pagination."
    ),
    version=__version__,
)

app.include_router(catalog_router)


@app.exception_handler(CatalogAPIError)
async def catalog_error_handler(request: Request, exc: CatalogAPIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions and return a bare 500, no detail leaked."""
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=CatalogAPIError().to_dict(),
    )


@app.get("/health")
def health_check():
    return {"msg": "healthy"}


def run() -> None:
    logger.info("Server is running on http://%s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
