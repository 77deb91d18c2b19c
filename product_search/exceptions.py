"""Exceptions du service de recherche de produits."""


class ProductSearchError(Exception):
    """Classe de base des erreurs du service."""


class CatalogError(ProductSearchError):
    """Le catalogue de produits est illisible ou mal formé."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Catalogue invalide ({path}) : {reason}")
