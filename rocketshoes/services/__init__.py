"""Backend access, stock checks, money helpers and notifications."""
from .api import StorefrontAPI
from .stock import StockOracle
from .notifications import CartNotification, CartNotifier

__all__ = [
    "StorefrontAPI",
    "StockOracle",
    "CartNotification",
    "CartNotifier",
]
