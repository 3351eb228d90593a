"""
Catalog repository.

WHAT: Read-only access to products and supplier listings
WHY: The chat core resolves reference prices by product id without owning the data
HOW: Abstract repository with an in-memory implementation seeded from prototype data
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .seed import DUMMY_PRODUCTS, DUMMY_SUPPLIER_LISTINGS
from ..models.catalog import Product, SupplierListing
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CatalogRepository(ABC):
    """Abstract interface for catalog lookups."""

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        """Retrieve a product by id, or None if unknown."""

    @abstractmethod
    def search_products(self, query: str = "") -> List[Product]:
        """Case-insensitive substring match on product name or supplier."""

    @abstractmethod
    def get_supplier_listings(self, product_id: str) -> Optional[List[SupplierListing]]:
        """Supplier listings for a product, or None if the product has none."""


class InMemoryCatalogRepository(CatalogRepository):
    """In-memory implementation of CatalogRepository."""

    def __init__(
        self,
        products: List[Product],
        supplier_listings: Optional[Dict[str, List[SupplierListing]]] = None,
    ):
        self._products: Dict[str, Product] = {p.id: p for p in products}
        self._listings: Dict[str, List[SupplierListing]] = dict(supplier_listings or {})

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def search_products(self, query: str = "") -> List[Product]:
        needle = (query or "").strip().lower()
        if not needle:
            return list(self._products.values())

        matches = [
            p for p in self._products.values()
            if needle in p.name.lower() or needle in p.supplier.lower()
        ]
        logger.debug(f"Catalog search '{needle}' matched {len(matches)} products")
        return matches

    def get_supplier_listings(self, product_id: str) -> Optional[List[SupplierListing]]:
        listings = self._listings.get(product_id)
        if listings is None:
            return None
        return list(listings)


def build_default_catalog() -> InMemoryCatalogRepository:
    """Build the catalog from the bundled prototype data."""
    products = [Product.model_validate(p) for p in DUMMY_PRODUCTS]
    listings = {
        product_id: [SupplierListing.model_validate(entry) for entry in entries]
        for product_id, entries in DUMMY_SUPPLIER_LISTINGS.items()
    }
    logger.info(f"Loaded catalog with {len(products)} products")
    return InMemoryCatalogRepository(products, listings)


# Singleton instance
catalog = build_default_catalog()


def get_catalog() -> CatalogRepository:
    """FastAPI dependency returning the process-wide catalog."""
    return catalog
