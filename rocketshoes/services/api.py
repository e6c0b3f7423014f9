"""
Storefront API Client

Async httpx client for the three read endpoints the cart depends on:
- GET /stock/{product_id}
- GET /products/{product_id}
- GET /products
"""

from typing import List, Optional

import httpx
from pydantic import ValidationError

from rocketshoes.config import API_BASE_URL, API_TIMEOUT
from rocketshoes.errors import BackendError
from rocketshoes.logging import get_logger
from rocketshoes.models import Product, StockRecord

logger = get_logger(__name__)


class StorefrontAPI:
    """Read-only access to the storefront backend."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: Optional[float] = API_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "StorefrontAPI":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def _get_json(self, path: str):
        """GET a path and decode its JSON body. Raises BackendError."""
        try:
            response = await self._client.get(path)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Backend returned {e.response.status_code} for {path}")
            raise BackendError(f"GET {path} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Backend request failed for {path}: {e}")
            raise BackendError(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise BackendError(f"GET {path} returned invalid JSON") from e

    async def get_stock(self, product_id: int) -> StockRecord:
        """Fetch the current stock record of a product. Never cached."""
        data = await self._get_json(f"/stock/{product_id}")
        if not isinstance(data, dict):
            raise BackendError(f"Unexpected stock payload for product {product_id}")
        try:
            return StockRecord(product_id=product_id, amount=data.get("amount"))
        except ValidationError as e:
            raise BackendError(f"Invalid stock record for product {product_id}") from e

    async def get_product(self, product_id: int) -> Optional[Product]:
        """
        Fetch a single product.

        Returns:
            The product, or None if the backend does not know it (404 or
            an empty body).
        """
        try:
            data = await self._get_json(f"/products/{product_id}")
        except BackendError as e:
            cause = e.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return None
            raise

        if not data:
            return None
        try:
            return Product.model_validate(data)
        except ValidationError as e:
            raise BackendError(f"Invalid product record for product {product_id}") from e

    async def list_products(self) -> List[Product]:
        """Fetch the full catalog (used by listing views, not by the cart)."""
        data = await self._get_json("/products")
        if not isinstance(data, list):
            raise BackendError("Unexpected product list payload")
        try:
            return [Product.model_validate(item) for item in data]
        except ValidationError as e:
            raise BackendError("Invalid product in product list") from e
