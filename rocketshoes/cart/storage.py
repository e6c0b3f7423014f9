"""
Durable cart slot.

CartStorage serializes the whole cart as a JSON array into one named
key-value slot. Slots are synchronous: a save completes before the
store returns control to its caller.
"""
import json
from pathlib import Path
from typing import Dict, Optional

from rocketshoes.config import CART_STORAGE_BACKEND, CART_STORAGE_KEY, CART_STORAGE_PATH
from rocketshoes.db import get_redis_sync
from rocketshoes.errors import CartErrorKind, CartStorageError
from rocketshoes.logging import get_logger, sanitize_string_for_logging

from .models import Cart

logger = get_logger(__name__)


class MemorySlot:
    """Process-local slot. Does not survive a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class FileSlot:
    """One JSON file per key under a storage directory."""

    def __init__(self, storage_dir: str | Path):
        self.storage_dir = Path(storage_dir)

    def _file_path(self, key: str) -> Path:
        # Keys like "@RocketShoes:cart" are not portable file names
        safe = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)
        return self.storage_dir / f"{safe}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._file_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CartStorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._file_path(key)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as e:
            raise CartStorageError(f"Cannot write {path}: {e}") from e


class RedisSlot:
    """Upstash Redis key. No TTL: the cart survives until overwritten."""

    def __init__(self, redis=None):
        """
        Raises:
            ValueError: if no client is given and Upstash credentials are missing.
        """
        self.redis = redis if redis is not None else get_redis_sync()

    def get(self, key: str) -> Optional[str]:
        try:
            return self.redis.get(key)
        except Exception as e:
            raise CartStorageError(f"Redis read failed: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(key, value)
        except Exception as e:
            raise CartStorageError(f"Redis write failed: {e}") from e


class CartStorage:
    """Loads and saves the cart in a single named slot."""

    def __init__(self, slot, key: str = CART_STORAGE_KEY):
        self.slot = slot
        self.key = key

    def load(self) -> Cart:
        """
        Return the stored cart.

        A missing, unreadable or unparseable value yields an empty cart;
        corruption is logged but never reported to the user.
        """
        try:
            data = self.slot.get(self.key)
        except CartStorageError as e:
            logger.warning(f"Stored cart unavailable, starting empty: {e}")
            return Cart()

        if not data:
            return Cart()

        try:
            return Cart.from_list(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                f"{CartErrorKind.PERSISTENCE_READ_CORRUPT.value}: ignoring stored cart "
                f"{sanitize_string_for_logging(str(data))!r}: {e}"
            )
            return Cart()

    def save(self, cart: Cart) -> None:
        """
        Overwrite the slot with the full cart.

        Raises:
            CartStorageError: if the slot rejects the write.
        """
        self.slot.set(self.key, json.dumps(cart.to_list(), ensure_ascii=False))


def build_slot(backend: str = CART_STORAGE_BACKEND, storage_path: str = CART_STORAGE_PATH):
    """Create the slot selected by CART_STORAGE_BACKEND."""
    if backend == "redis":
        return RedisSlot()
    if backend == "file":
        return FileSlot(storage_path)
    if backend == "memory":
        return MemorySlot()
    raise ValueError(f"Unknown cart storage backend: {backend}")
