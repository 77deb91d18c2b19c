"""Score de similarité entre une requête et un nom de produit."""
from product_search.config import settings
from product_search.scoring.distance import string_distance


def normalize(text: str) -> str:
    """Minuscules, sans espaces en bordure."""
    return text.strip().lower()


class SimilarityEvaluator:
    """Évalue la proximité d'un candidat avec la requête, dans [0, 1]."""

    def __init__(
        self,
        exact_score: float = settings.EXACT_SCORE,
        substring_score: float = settings.SUBSTRING_SCORE,
    ):
        self.exact_score = exact_score
        self.substring_score = substring_score

    def score(self, query: str, candidate: str) -> float:
        """
        Calcule le score de similarité.

        1. Égalité après normalisation : score exact (1.0).
        2. Requête contenue dans le candidat : score fixe élevé (0.9), quelle
           que soit la distance d'édition. Les noms de produits ne diffèrent
           souvent que par un suffixe (formule N-P-K, conditionnement).
        3. Sinon : ``1 - distance / max(len(q), len(c))``.

        Args:
            query: Texte saisi par l'utilisateur
            candidate: Nom du produit

        Returns:
            Score dans [0, 1]
        """
        q = normalize(query)
        c = normalize(candidate)

        if q == c:
            return self.exact_score

        # Une requête vide est contenue dans tout candidat
        if q in c:
            return self.substring_score

        return string_distance.similarity(q, c)


similarity_evaluator = SimilarityEvaluator()
