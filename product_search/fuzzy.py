"""
Recherche floue de produits : score, recherche classée, autocomplétion et
surlignage.

Fonctions pures : le catalogue est passé à chaque appel, rien n'est mis en
cache et aucune entrée n'est modifiée. Utilisables depuis plusieurs threads
sans synchronisation.

Exemple :
    from product_search.fuzzy import search, highlight
    hits = search("milorganit", catalog)
    spans = highlight(hits[0]["name"], "milorganit")
"""
from typing import Any, List, Sequence, TypeVar

from product_search.config import settings
from product_search.models import HighlightSpan
from product_search.scoring.evaluator import similarity_evaluator
from product_search.search.highlight import highlight
from product_search.search.search_utils import SearchUtils

T = TypeVar("T")

EXACT_SCORE = settings.EXACT_SCORE
SUBSTRING_SCORE = settings.SUBSTRING_SCORE
SEARCH_THRESHOLD = settings.SEARCH_THRESHOLD
AUTOCOMPLETE_THRESHOLD = settings.AUTOCOMPLETE_THRESHOLD
AUTOCOMPLETE_MIN_LENGTH = settings.AUTOCOMPLETE_MIN_LENGTH
MAX_SUGGESTIONS = settings.MAX_SUGGESTIONS

_utils = SearchUtils(evaluator=similarity_evaluator)


def score(query: str, candidate: str) -> float:
    """Similarité entre la requête et un nom, dans [0, 1]."""
    return similarity_evaluator.score(query, candidate)


def search(query: str, catalog: Sequence[T], threshold: float = SEARCH_THRESHOLD) -> List[T]:
    """Entrées dont le score atteint ``threshold``, de la plus pertinente à la moins pertinente."""
    return _utils.search(query, catalog, threshold)


def suggest(query: str, catalog: Sequence[Any], max_suggestions: int = MAX_SUGGESTIONS) -> List[str]:
    """Au plus ``max_suggestions`` noms distincts proches de la requête."""
    return _utils.suggest(query, catalog, max_suggestions)


__all__ = [
    "AUTOCOMPLETE_MIN_LENGTH",
    "AUTOCOMPLETE_THRESHOLD",
    "EXACT_SCORE",
    "HighlightSpan",
    "MAX_SUGGESTIONS",
    "SEARCH_THRESHOLD",
    "SUBSTRING_SCORE",
    "highlight",
    "score",
    "search",
    "suggest",
]
