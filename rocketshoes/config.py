"""
Runtime configuration for the cart core.

All settings are read from environment variables once, on import.
"""

import os
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    """Read an optional float env var; empty, missing or invalid means None."""
    raw = os.environ.get(name, "").strip()
    try:
        return float(raw) if raw else None
    except ValueError:
        return None


def _int_env(name: str, default: int) -> int:
    """Read an int env var, falling back to the default when unset or invalid."""
    raw = os.environ.get(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


# Backend (json-server style REST API)
API_BASE_URL = os.environ.get("ROCKETSHOES_API_URL", "http://localhost:3333")
# None disables the timeout: a hung read hangs the operation
API_TIMEOUT = _optional_float("ROCKETSHOES_API_TIMEOUT")

# Durable cart slot
CART_STORAGE_BACKEND = os.environ.get("CART_STORAGE_BACKEND", "file").lower()
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "@RocketShoes:cart")
CART_STORAGE_PATH = os.environ.get("CART_STORAGE_PATH", "data/storage")

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Notifications
CART_LANGUAGE = os.environ.get("CART_LANGUAGE", "en")
NOTIFICATION_HISTORY = _int_env("CART_NOTIFICATION_HISTORY", 20)
