"""Calcul de distance Levenshtein."""
import Levenshtein as lev


class StringDistance:
    """Classe pour calculer les distances entre chaînes."""

    def distance(self, s1: str, s2: str) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Coût unitaire pour l'insertion, la suppression et la substitution.

        Args:
            s1: Première chaîne
            s2: Deuxième chaîne

        Returns:
            Nombre minimal d'éditions pour passer de s1 à s2
        """
        if not s1 or not s2:
            return max(len(s1), len(s2))

        # python-Levenshtein (implémentation C)
        return lev.distance(s1, s2)

    def similarity(self, s1: str, s2: str) -> float:
        """Similarité normalisée ``1 - distance / longueur max``, dans [0, 1]."""
        longest = max(len(s1), len(s2))
        if longest == 0:
            return 1.0
        return 1.0 - self.distance(s1, s2) / longest


# Instance globale réutilisable
string_distance = StringDistance()
