"""Main module for the FastAPI application."""
from contextlib import asynccontextmanager
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status
from redis.exceptions import ConnectionError as RedisConnectionError

from .cache import cache_manager
from .catalog import ProductCatalog
from .config import settings
from .exceptions import CatalogError
from .logger import logger
from .models import (
    HighlightRequest,
    HighlightResponse,
    SearchRequest,
    SearchResponse,
    SpreaderBrand,
    SpreaderModelDetail,
    SpreaderSetting,
    SuggestRequest,
    SuggestResponse,
)
from .search.search_service import ProductSearchService

# Catalogue en lecture seule (chargé au démarrage ou au premier accès)
catalog: ProductCatalog = ProductCatalog(settings.CATALOG_PATH)

# Service de recherche ; `service` est patché par les tests
service: ProductSearchService = ProductSearchService(catalog)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info("Starting up product search API...")

    try:
        catalog.load()
    except CatalogError as e:
        logger.error("Failed to load product catalog: {error}", error=e)

    try:
        await cache_manager.ping()
        logger.info("Redis cache connected successfully.")
    except RedisConnectionError as e:
        logger.error("Failed to connect to Redis: {error}", error=e)

    yield

    logger.info("Shutting down product search API...")
    await cache_manager.close()
    logger.info("Redis connection closed.")


app = FastAPI(
    title="Lawn product search",
    lifespan=lifespan
)


def get_service() -> ProductSearchService:
    """Dépendance FastAPI pour obtenir l'instance du service de recherche."""
    return service


@app.post("/search", response_model=SearchResponse)
async def search(req: SearchRequest, svc: ProductSearchService = Depends(get_service)):
    """Ranked fuzzy search over the bundled catalog, or over `req.catalog` when given."""
    logger.info("Search request: query={query!r} threshold={threshold}",
                query=req.query, threshold=req.threshold)
    try:
        return await svc.search(req.query, threshold=req.threshold, catalog=req.catalog)
    except Exception as e:
        logger.exception("Error processing search request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.post("/suggest", response_model=SuggestResponse)
async def suggest(req: SuggestRequest, svc: ProductSearchService = Depends(get_service)):
    """Autocomplete suggestions (at least two characters)."""
    try:
        return svc.suggest(req.query, max_suggestions=req.max_suggestions, catalog=req.catalog)
    except Exception as e:
        logger.exception("Error processing suggest request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.post("/highlight", response_model=HighlightResponse)
async def highlight(req: HighlightRequest, svc: ProductSearchService = Depends(get_service)):
    """Split `text` into matched / unmatched spans for display."""
    return svc.highlight(req.text, req.query)


@app.get("/products/settings", response_model=List[SpreaderSetting])
async def product_settings(
    name: str = Query(..., min_length=1),
    svc: ProductSearchService = Depends(get_service),
):
    """Spreader settings for every product whose name contains `name`."""
    try:
        return svc.settings_for_product(name)
    except CatalogError as e:
        logger.exception("Product catalog unavailable")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                            detail={"error": str(e)}) from e


@app.get("/spreaders/brands", response_model=List[SpreaderBrand])
async def spreader_brands(
    tier: Optional[Literal["free", "pro"]] = None,
    svc: ProductSearchService = Depends(get_service),
):
    """Spreader brands with their models, optionally limited to the free or pro tier."""
    return svc.brands(tier)


@app.get("/spreaders/models/{model_id}", response_model=SpreaderModelDetail)
async def spreader_model(model_id: str, svc: ProductSearchService = Depends(get_service)):
    """One spreader model and every product setting known for it."""
    detail = svc.model_detail(model_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail={"error": f"unknown spreader model: {model_id}"})
    return detail


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "Product search API is running"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
async def health_check():
    """
    Health check endpoint.

    Checks the product catalog and the Redis cache.
    Returns 200 OK if both are usable, otherwise 503 Service Unavailable.
    """
    services_status = {"catalog": "ok", "redis": "ok"}
    try:
        await cache_manager.ping()
    except RedisConnectionError:
        services_status["redis"] = "error"
        logger.error("Health check failed: Redis connection error.")

    try:
        catalog.total_settings()
    except CatalogError:
        services_status["catalog"] = "error"
        logger.error("Health check failed: product catalog unavailable.")

    if "error" in services_status.values():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=services_status)

    return services_status
