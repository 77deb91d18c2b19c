"""Modèles Pydantic pour le catalogue, les requêtes et les réponses."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from product_search.config import settings


class SpreaderSetting(BaseModel): # pylint: disable=too-few-public-methods
    """Réglage d'épandeur pour un produit (entrée du catalogue)."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    spreader_model_id: str = Field(alias="spreaderModelId")
    name: str = Field(alias="productName")
    application_rate_lbs_per_1k: float = Field(alias="applicationRateLbsPer1K")
    setting_value: str = Field(alias="settingValue")
    notes: Optional[str] = None
    source: Literal["manufacturer", "siteone", "verified_community"]
    confidence: Literal["official", "high", "moderate"]


class SettingRange(BaseModel): # pylint: disable=too-few-public-methods
    """Plage du cadran de réglage, bornes telles qu'imprimées."""
    model_config = ConfigDict(frozen=True)

    min: str
    max: str


class SpreaderModel(BaseModel): # pylint: disable=too-few-public-methods
    """Modèle d'épandeur."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    brand_id: str = Field(alias="brandId")
    name: str
    type: Literal["broadcast", "drop", "handheld", "tow-behind"]
    setting_type: Literal["numeric", "lettered", "dial"] = Field(alias="settingType")
    setting_range: SettingRange = Field(alias="settingRange")
    discontinued: bool = False


class SpreaderBrand(BaseModel): # pylint: disable=too-few-public-methods
    """Marque d'épandeurs et ses modèles."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    models: List[SpreaderModel] = Field(default_factory=list)


class CatalogEntry(BaseModel): # pylint: disable=too-few-public-methods
    """Entrée d'un catalogue fourni par l'appelant : un ``name`` et des champs libres."""
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str


class HighlightSpan(BaseModel): # pylint: disable=too-few-public-methods
    """Portion de texte, surlignée ou non."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    is_match: bool = Field(alias="isMatch")


class SearchRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de recherche floue."""
    query: str = ""
    threshold: float = Field(default=settings.SEARCH_THRESHOLD, ge=0.0, le=1.0)
    # Catalogue fourni par l'appelant ; sinon le catalogue embarqué est utilisé
    catalog: Optional[List[CatalogEntry]] = None


class SearchResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de recherche."""
    hits: List[Dict[str, Any]]
    total: int
    total_before_filter: int # Taille du catalogue parcouru
    query_time_ms: float
    memory_used_mb: Optional[float] = None

    model_config = ConfigDict(extra="allow")


class SuggestRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête d'autocomplétion."""
    query: str = ""
    max_suggestions: int = Field(default=settings.MAX_SUGGESTIONS, ge=0)
    catalog: Optional[List[CatalogEntry]] = None


class SuggestResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Suggestions d'autocomplétion, dans l'ordre de pertinence."""
    suggestions: List[str]


class HighlightRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Texte à découper selon la requête."""
    text: str
    query: str = ""


class HighlightResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Découpage d'un texte en portions surlignées ou non."""
    spans: List[HighlightSpan]


class SpreaderModelDetail(BaseModel): # pylint: disable=too-few-public-methods
    """Modèle d'épandeur et ses réglages connus."""
    model: SpreaderModel
    settings: List[SpreaderSetting]
