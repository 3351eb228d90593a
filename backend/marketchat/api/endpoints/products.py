"""
Catalog endpoints.

WHAT: Product search and per-product supplier listings
WHY: The client picks a product (and so a chat room) from these lists
HOW: FastAPI router over the injected catalog repository
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ...core.catalog import CatalogRepository, get_catalog
from ...models.catalog import Product, SupplierListing
from ...utils.exceptions import ProductNotFoundException, SuppliersNotFoundException
from ...utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/products/search", response_model=List[Product])
async def search_products(
    q: str = Query(default="", max_length=100, description="Matches product name or supplier"),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """
    Search the catalog.

    Case-insensitive substring match on name or supplier; an empty query
    returns every product.
    """
    results = catalog.search_products(q)
    logger.info(f"Product search q='{q}' returned {len(results)} results")
    return results


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str, catalog: CatalogRepository = Depends(get_catalog)):
    """Get one product by id."""
    product = catalog.get_product(product_id)
    if product is None:
        raise ProductNotFoundException(product_id)
    return product


@router.get("/product-suppliers/{product_id}", response_model=List[SupplierListing])
async def get_product_suppliers(product_id: str, catalog: CatalogRepository = Depends(get_catalog)):
    """
    List the suppliers offering a product.

    Raises:
        SuppliersNotFoundException: 404 when the product has no listings
    """
    listings = catalog.get_supplier_listings(product_id)
    if listings is None:
        raise SuppliersNotFoundException(product_id)
    return listings
