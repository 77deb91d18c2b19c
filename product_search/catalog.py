"""Catalogue en lecture seule des épandeurs et de leurs réglages par produit."""
import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from product_search.config import settings
from product_search.exceptions import CatalogError
from product_search.logger import logger
from product_search.models import SpreaderBrand, SpreaderModel, SpreaderSetting

_settings_adapter = TypeAdapter(List[SpreaderSetting])
_brands_adapter = TypeAdapter(List[SpreaderBrand])

# Marques disponibles sans abonnement
FREE_BRAND_IDS = ("scotts", "earthway", "lesco")


class ProductCatalog:
    """Charge le fichier JSON du catalogue et expose des vues de lecture."""

    def __init__(self, path: Union[str, Path] = settings.CATALOG_PATH):
        self.path = Path(path)
        self._entries: Optional[List[SpreaderSetting]] = None
        self._brands: Optional[List[SpreaderBrand]] = None

    def load(self) -> List[SpreaderSetting]:
        """Lit et valide le fichier. Lève CatalogError si illisible.

        Le document est soit une liste de réglages, soit un objet
        ``{"brands": [...], "settings": [...]}``.
        """
        try:
            with self.path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except OSError as e:
            raise CatalogError(self.path, f"lecture impossible: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(self.path, f"JSON invalide: {e}") from e

        if isinstance(raw, dict):
            raw_brands = raw.get("brands", [])
            raw_settings = raw.get("settings", [])
        else:
            raw_brands, raw_settings = [], raw

        try:
            brands = _brands_adapter.validate_python(raw_brands)
            entries = _settings_adapter.validate_python(raw_settings)
        except ValidationError as e:
            raise CatalogError(self.path, f"entrées invalides: {e.error_count()} erreur(s)") from e

        logger.info(
            "Catalogue chargé : {brands} marques, {count} réglages depuis {path}",
            brands=len(brands), count=len(entries), path=self.path,
        )
        self._brands = brands
        self._entries = entries
        return entries

    @property
    def entries(self) -> List[SpreaderSetting]:
        if self._entries is None:
            self.load()
        return list(self._entries)

    @property
    def brands(self) -> List[SpreaderBrand]:
        if self._brands is None:
            self.load()
        return list(self._brands)

    # -----------------------------------------------------------------
    # Produits et réglages
    # -----------------------------------------------------------------
    def unique_products(self) -> List[SpreaderSetting]:
        """Premier réglage de chaque produit, dans l'ordre du catalogue."""
        products = {}
        for entry in self.entries:
            products.setdefault(entry.name, entry)
        return list(products.values())

    def product_names(self) -> List[str]:
        return sorted({entry.name for entry in self.entries})

    def settings_for_product(self, product_name: str) -> List[SpreaderSetting]:
        """Réglages dont le nom de produit contient ``product_name`` (casse ignorée)."""
        needle = product_name.lower()
        return [e for e in self.entries if needle in e.name.lower()]

    def settings_for_model(self, model_id: str) -> List[SpreaderSetting]:
        return [e for e in self.entries if e.spreader_model_id == model_id]

    def total_settings(self) -> int:
        return len(self.entries)

    # -----------------------------------------------------------------
    # Marques et modèles
    # -----------------------------------------------------------------
    def free_brands(self) -> List[SpreaderBrand]:
        return [b for b in self.brands if b.id in FREE_BRAND_IDS]

    def pro_brands(self) -> List[SpreaderBrand]:
        return [b for b in self.brands if b.id not in FREE_BRAND_IDS]

    def get_brand(self, brand_id: str) -> Optional[SpreaderBrand]:
        return next((b for b in self.brands if b.id == brand_id), None)

    def get_model(self, model_id: str) -> Optional[SpreaderModel]:
        """Modèle d'épandeur par identifiant, toutes marques confondues."""
        for brand in self.brands:
            for model in brand.models:
                if model.id == model_id:
                    return model
        return None

    def total_brands(self) -> int:
        return len(self.brands)

    def total_models(self) -> int:
        return sum(len(b.models) for b in self.brands)
