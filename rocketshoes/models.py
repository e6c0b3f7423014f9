"""
Pydantic Models - Backend Payload Schemas

Shapes of the records returned by the storefront API:
- Product (GET /products, GET /products/{id})
- StockRecord (GET /stock/{id})
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Catalog product. Owned by the backend, immutable once fetched."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    price: Decimal
    image: str


class StockRecord(BaseModel):
    """Units of a product available for purchase at read time."""
    model_config = ConfigDict(frozen=True)

    product_id: int
    amount: int = Field(description="Available quantity")
