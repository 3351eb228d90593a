"""
Catalog domain models.

WHAT: Products and per-supplier listings served by the catalog store
WHY: Typed, read-only view of the external catalog for the chat core and REST API
HOW: Pydantic v2 models with camelCase aliases matching the client payloads
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog product; immutable for the lifetime of a chat."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    category: str = ""
    supplier: str
    reference_price: float = Field(..., gt=0.0, alias="mrp")
    unit: str
    image_url: str = Field(default="", alias="imageUrl")


class SupplierListing(BaseModel):
    """One supplier's offer for a product."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    supplier_id: str = Field(..., alias="supplierId")
    supplier_name: str = Field(..., alias="supplierName")
    price: float = Field(..., gt=0.0)
    unit: str
    distance: float = Field(..., ge=0.0, description="Distance in km")
    rating: float = Field(..., ge=0.0, le=5.0)
