"""Cart package: models, storage, and the cart store."""
from .models import CartItem, Cart, CartResult
from .storage import CartStorage, FileSlot, MemorySlot, RedisSlot, build_slot
from .service import CartStore, build_cart_store

__all__ = [
    "CartItem",
    "Cart",
    "CartResult",
    "CartStorage",
    "FileSlot",
    "MemorySlot",
    "RedisSlot",
    "build_slot",
    "CartStore",
    "build_cart_store",
]
