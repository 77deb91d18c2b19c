"""Découpage d'un nom de produit pour surligner la partie correspondant à la requête."""
from typing import List, Tuple

from product_search.models import HighlightSpan
from product_search.scoring.evaluator import normalize


def _lower_with_offsets(text: str) -> Tuple[str, List[int]]:
    """``text.lower()`` et, pour chaque caractère produit, l'indice du caractère d'origine.

    ``lower()`` peut allonger un caractère (``"İ"`` donne deux caractères).
    """
    pieces, origin = [], []
    for index, char in enumerate(text):
        lowered = char.lower()
        pieces.append(lowered)
        origin.extend([index] * len(lowered))
    return "".join(pieces), origin


def highlight(text: str, query: str) -> List[HighlightSpan]:
    """
    Découpe ``text`` autour de la première occurrence de ``query``.

    La recherche ignore la casse ; la portion surlignée garde la casse
    d'origine du texte. Pour un texte ASCII elle fait exactement la longueur
    de la requête normalisée ; si la mise en minuscules change la longueur
    d'un caractère, les bornes sont ramenées sur les caractères d'origine.
    Seule la première occurrence est surlignée.
    """
    needle = normalize(query or "")
    if not needle:
        return [HighlightSpan(text=text, is_match=False)]

    lowered, origin = _lower_with_offsets(text)
    found = lowered.find(needle)
    if found == -1:
        return [HighlightSpan(text=text, is_match=False)]

    start = origin[found]
    end = origin[found + len(needle) - 1] + 1
    spans = []
    if start > 0:
        spans.append(HighlightSpan(text=text[:start], is_match=False))
    spans.append(HighlightSpan(text=text[start:end], is_match=True))
    if end < len(text):
        spans.append(HighlightSpan(text=text[end:], is_match=False))
    return spans
