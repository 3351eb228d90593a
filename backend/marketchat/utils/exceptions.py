"""
Custom business exceptions for the REST and chat layers.

WHAT: Domain-specific exceptions that map to HTTP status codes
WHY: Consistent error handling across all API endpoints
HOW: Custom exception classes with error codes and messages
"""

from typing import Optional, List, Dict, Any


class BusinessException(Exception):
    """Base class for business logic exceptions."""

    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ProductNotFoundException(BusinessException):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id}
        )


class SuppliersNotFoundException(BusinessException):
    """Raised when no supplier listings exist for a product."""

    def __init__(self, product_id: str):
        super().__init__(
            message="No suppliers found for this product.",
            code="SUPPLIERS_NOT_FOUND",
            details={"product_id": product_id}
        )


class ValidationException(BusinessException):
    """Raised for validation errors."""

    def __init__(self, message: str, field_errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field_errors": field_errors} if field_errors else None
        )
