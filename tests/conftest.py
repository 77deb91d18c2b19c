# tests/conftest.py
import json

import pytest
from unittest.mock import MagicMock, AsyncMock

from product_search.catalog import ProductCatalog


# --- Données ---

@pytest.fixture
def product_dicts():
    """Petit catalogue sous forme de dicts, avec un doublon de nom."""
    return [
        {"id": "stb", "name": "Scotts Turf Builder Lawn Food 32-0-4", "rate": 3.2},
        {"id": "wf", "name": "Scotts Turf Builder Weed & Feed 28-0-3", "rate": 2.87},
        {"id": "milo-1", "name": "Milorganite 6-4-0", "rate": 6.25},
        {"id": "milo-2", "name": "Milorganite 6-4-0", "rate": 6.25},
        {"id": "lesco", "name": "Lesco 24-0-11 Professional Fertilizer", "rate": 3.1},
    ]


@pytest.fixture
def bundled_catalog():
    """Catalogue embarqué dans le paquet."""
    return ProductCatalog()


@pytest.fixture
def catalog_file(tmp_path):
    """Écrit un fichier catalogue minimal et renvoie son chemin."""
    def _write(content):
        path = tmp_path / "settings.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


# --- Mocks ---

@pytest.fixture
def mock_cache_manager():
    """Fixture pour un mock du gestionnaire de cache Redis."""
    cache = MagicMock()
    cache.get = AsyncMock(return_value=None)  # Par défaut, le cache est toujours vide (miss)
    cache.set = AsyncMock()
    cache.ping = AsyncMock(return_value=True)
    return cache


@pytest.fixture
def product_service(bundled_catalog, mock_cache_manager):
    """ProductSearchService sur le catalogue embarqué, cache Redis mocké."""
    from product_search.search.search_service import ProductSearchService

    service = ProductSearchService(catalog=bundled_catalog)
    service.cache = mock_cache_manager
    return service
