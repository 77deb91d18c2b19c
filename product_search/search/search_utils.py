"""
SearchUtils - recherche floue sur un catalogue de produits.

Le catalogue est toujours fourni par l'appelant ; aucune donnée n'est
conservée d'un appel à l'autre.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, TypeVar

from product_search.config import settings
from product_search.logger import logger
from product_search.scoring.evaluator import SimilarityEvaluator, normalize
from product_search.scoring.ranking import Ranker, ScoredEntry

T = TypeVar("T")


def entry_name(entry: Any) -> str:
    """Nom d'une entrée : clé ``name`` d'un dict, sinon attribut ``name``."""
    if isinstance(entry, Mapping):
        return entry["name"]
    return entry.name


class SearchUtils:
    """Recherche classée et autocomplétion sur un catalogue."""

    def __init__(self, evaluator: Optional[SimilarityEvaluator] = None):
        self.evaluator = evaluator or SimilarityEvaluator()
        self.ranker = Ranker()

    # -----------------------------------------------------------------
    # Recherche classée
    # -----------------------------------------------------------------
    def search(
            self,
            query: str,
            catalog: Sequence[T],
            threshold: float = settings.SEARCH_THRESHOLD) -> List[T]:
        """
        Classe les entrées du catalogue par pertinence décroissante.

        Args:
            query: Texte saisi
            catalog: Entrées exposant un ``name``
            threshold: Score minimal pour être retenu

        Returns:
            Entrées retenues, triées (tri stable). Une requête vide renvoie
            le catalogue tel quel.
        """
        if not query or not query.strip():
            return list(catalog)

        scored = [
            ScoredEntry(entry, self.evaluator.score(query, entry_name(entry)))
            for entry in catalog
        ]
        ranked = self.ranker.rank(scored, threshold)

        logger.debug(
            "Recherche '{query}' : {kept}/{total} produits retenus (seuil {threshold})",
            query=query, kept=len(ranked), total=len(scored), threshold=threshold,
        )
        return [s.entry for s in ranked]

    # -----------------------------------------------------------------
    # Autocomplétion
    # -----------------------------------------------------------------
    def unique_names(self, catalog: Sequence[Any]) -> List[str]:
        """Noms distincts du catalogue, dans l'ordre de première apparition."""
        return list(dict.fromkeys(entry_name(entry) for entry in catalog))

    def suggest(
            self,
            query: str,
            catalog: Sequence[Any],
            max_suggestions: int = settings.MAX_SUGGESTIONS) -> List[str]:
        """Suggestions de noms, plus strictes que la recherche complète."""
        if len(normalize(query or "")) < settings.AUTOCOMPLETE_MIN_LENGTH:
            return []
        if max_suggestions <= 0:
            return []

        names = [{"name": name} for name in self.unique_names(catalog)]
        ranked = self.search(query, names, settings.AUTOCOMPLETE_THRESHOLD)
        return [entry["name"] for entry in ranked[:max_suggestions]]
