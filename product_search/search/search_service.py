"""Service de recherche de produits : catalogue embarqué, cache Redis et scoring SearchUtils."""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import psutil
from pydantic import BaseModel
from redis.exceptions import RedisError

from product_search.cache import cache_manager
from product_search.catalog import ProductCatalog
from product_search.config import settings
from product_search.logger import logger
from product_search.models import (
    HighlightResponse,
    SearchResponse,
    SpreaderBrand,
    SpreaderModelDetail,
    SpreaderSetting,
    SuggestResponse,
)
from product_search.scoring.evaluator import normalize
from product_search.search.highlight import highlight
from product_search.search.search_utils import SearchUtils


@dataclass
class SearchContext:
    """Contexte d'une recherche."""
    query: str
    threshold: float
    catalog: List[Any]
    from_request: bool
    start_time: float


class ProductSearchService:
    """Expose la recherche floue sur le catalogue embarqué ou sur un catalogue fourni."""

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog
        self.utils = SearchUtils()
        self.cache = cache_manager

    def _products(self, catalog: Optional[List[Any]]) -> List[Any]:
        if catalog is not None:
            return catalog
        return self.catalog.unique_products()

    @staticmethod
    def _cache_key(query: str, threshold: float) -> str:
        return f"search:{normalize(query)}:{threshold}"

    @staticmethod
    def _as_hit(entry: Any) -> Dict[str, Any]:
        if isinstance(entry, BaseModel):
            return entry.model_dump()
        return dict(entry)

    async def search(
            self,
            query: str,
            threshold: float = settings.SEARCH_THRESHOLD,
            catalog: Optional[List[Any]] = None
        ) -> SearchResponse:
        """Recherche classée, avec cache pour le catalogue embarqué.

        Args:
            query: Texte saisi.
            threshold: Score minimal des résultats.
            catalog: Catalogue fourni par l'appelant (jamais mis en cache).

        Returns:
            Un objet SearchResponse avec les résultats triés.
        """
        use_cache = settings.ENABLE_CACHE and catalog is None
        cache_key = self._cache_key(query, threshold)

        if use_cache:
            cached_result = await self._cache_get(cache_key)
            if cached_result:
                logger.info("Cache HIT for key: {key}", key=cache_key)
                return SearchResponse.model_validate_json(cached_result)
            logger.info("Cache MISS for key: {key}", key=cache_key)

        ctx = SearchContext(
            query=query,
            threshold=threshold,
            catalog=self._products(catalog),
            from_request=catalog is not None,
            start_time=time.time(),
        )
        response = self._execute_search(ctx)

        if use_cache:
            await self._cache_set(cache_key, response.model_dump_json())
        return response

    async def _cache_get(self, key: str) -> Optional[str]:
        """Lecture du cache ; une panne Redis équivaut à un MISS."""
        try:
            return await self.cache.get(key)
        except RedisError as e:
            logger.warning("Cache indisponible (lecture {key}) : {error}", key=key, error=e)
            return None

    async def _cache_set(self, key: str, value: str) -> None:
        try:
            await self.cache.set(key, value, expire=settings.CACHE_TTL_SECONDS)
        except RedisError as e:
            logger.warning("Cache indisponible (écriture {key}) : {error}", key=key, error=e)

    def _execute_search(self, ctx: SearchContext) -> SearchResponse:
        """Exécute la recherche sans cache."""
        ranked = self.utils.search(ctx.query, ctx.catalog, ctx.threshold)
        hits = [self._as_hit(entry) for entry in ranked]

        duration = time.time() - ctx.start_time
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024

        logger.info(
            "Recherche (query: '{query}', catalogue {origin}) : {count} résultats | "
            "Durée = {duration:.4f}s | RAM = {memory:.2f} Mo",
            query=ctx.query,
            origin="fourni" if ctx.from_request else "embarqué",
            count=len(hits),
            duration=duration,
            memory=memory_mb,
        )

        return SearchResponse(
            hits=hits,
            total=len(hits),
            total_before_filter=len(ctx.catalog),
            query_time_ms=round(duration * 1000, 2),
            memory_used_mb=memory_mb,
        )

    def suggest(
            self,
            query: str,
            max_suggestions: int = settings.MAX_SUGGESTIONS,
            catalog: Optional[List[Any]] = None
        ) -> SuggestResponse:
        """Suggestions d'autocomplétion."""
        suggestions = self.utils.suggest(query, self._products(catalog), max_suggestions)
        return SuggestResponse(suggestions=suggestions)

    def highlight(self, text: str, query: str) -> HighlightResponse:
        return HighlightResponse(spans=highlight(text, query))

    def settings_for_product(self, product_name: str) -> List[SpreaderSetting]:
        return self.catalog.settings_for_product(product_name)

    def brands(self, tier: Optional[str] = None) -> List[SpreaderBrand]:
        """Marques d'épandeurs ; ``tier`` = "free" ou "pro" pour filtrer."""
        if tier == "free":
            return self.catalog.free_brands()
        if tier == "pro":
            return self.catalog.pro_brands()
        return self.catalog.brands

    def model_detail(self, model_id: str) -> Optional[SpreaderModelDetail]:
        model = self.catalog.get_model(model_id)
        if model is None:
            return None
        return SpreaderModelDetail(model=model, settings=self.catalog.settings_for_model(model_id))
