"""Pytest configuration and fixtures"""
import asyncio
import os
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import pytest

# Set test environment variables before rocketshoes.config is imported
os.environ.setdefault("ROCKETSHOES_API_URL", "http://backend.test")
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("CART_LANGUAGE", "en")

from rocketshoes.cart import CartStorage, CartStore, MemorySlot  # noqa: E402
from rocketshoes.errors import BackendError  # noqa: E402
from rocketshoes.models import Product, StockRecord  # noqa: E402
from rocketshoes.services.notifications import CartNotifier  # noqa: E402


class FakeStorefrontAPI:
    """In-memory backend: stock and products keyed by product id."""

    def __init__(self, products: Dict[int, Product], stock: Dict[int, int], yield_control: bool = False):
        self.products = products
        self.stock = stock
        self.yield_control = yield_control
        self.failing_stock: set = set()
        self.failing_products: set = set()
        self.calls: List[Tuple[str, int]] = []

    async def _maybe_yield(self):
        if self.yield_control:
            await asyncio.sleep(0)

    async def get_stock(self, product_id: int) -> StockRecord:
        self.calls.append(("stock", product_id))
        await self._maybe_yield()
        if product_id in self.failing_stock:
            raise BackendError("stock read failed")
        return StockRecord(product_id=product_id, amount=self.stock.get(product_id, 0))

    async def get_product(self, product_id: int) -> Optional[Product]:
        self.calls.append(("product", product_id))
        await self._maybe_yield()
        if product_id in self.failing_products:
            raise BackendError("product read failed")
        return self.products.get(product_id)


class RecordingSlot(MemorySlot):
    """MemorySlot that counts writes."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes: List[str] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append(value)
        super().set(key, value)


@pytest.fixture
def sample_products() -> Dict[int, Product]:
    """Sample catalog"""
    return {
        1: Product(id=1, title="Tênis de Caminhada Leve Confortável", price=Decimal("179.90"),
                   image="https://example.test/shoe-1.jpg"),
        2: Product(id=2, title="Tênis VR Caminhada Confortável", price=Decimal("139.90"),
                   image="https://example.test/shoe-2.jpg"),
        3: Product(id=3, title="Tênis Adidas Duramo Lite 2.0", price=Decimal("219.90"),
                   image="https://example.test/shoe-3.jpg"),
    }


@pytest.fixture
def make_api(sample_products):
    """Factory for fake backends over the sample catalog"""
    def _make(stock=None, yield_control=False) -> FakeStorefrontAPI:
        return FakeStorefrontAPI(
            products=sample_products,
            stock={1: 5, 2: 3, 3: 1} if stock is None else stock,
            yield_control=yield_control,
        )
    return _make


@pytest.fixture
def fake_api(make_api) -> FakeStorefrontAPI:
    return make_api()


@pytest.fixture
def make_slot():
    """Factory for recording slots with optional stored values"""
    return RecordingSlot


@pytest.fixture
def slot() -> RecordingSlot:
    return RecordingSlot()


@pytest.fixture
def storage(slot) -> CartStorage:
    return CartStorage(slot, key="@RocketShoes:cart")


@pytest.fixture
def notifier() -> CartNotifier:
    return CartNotifier(lang="en")


@pytest.fixture
def store(fake_api, storage, notifier) -> CartStore:
    return CartStore(api=fake_api, storage=storage, notifier=notifier)
