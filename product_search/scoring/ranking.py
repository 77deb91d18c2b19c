from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ScoredEntry(Generic[T]):
    """Entrée du catalogue et son score, le temps d'une recherche."""
    entry: T
    score: float


class Ranker:
    def rank(self, scored: List[ScoredEntry[T]], threshold: float = 0.0) -> List[ScoredEntry[T]]:
        # sorted() est stable : à score égal, l'ordre du catalogue est conservé
        kept = [s for s in scored if s.score >= threshold]
        return sorted(kept, key=lambda s: -s.score)
