"""
Cart Error Kinds and Messages

Centralized error kinds and default (English) messages for rejected
cart operations. Translated texts live in rocketshoes/i18n/locales.
"""

from enum import Enum


class CartErrorKind(str, Enum):
    """Why a cart operation left the cart unchanged."""
    OUT_OF_STOCK = "out_of_stock"  # Requested amount > stock, or stock read failed
    PRODUCT_UNAVAILABLE = "product_unavailable"  # Product record could not be fetched
    NOT_FOUND = "not_found"  # Remove of a product absent from the cart
    PERSISTENCE_READ_CORRUPT = "persistence_read_corrupt"  # Never shown to the user


# Default messages (used when a translation is missing)
ERROR_OUT_OF_STOCK = "Requested quantity exceeds stock"
ERROR_PRODUCT_UNAVAILABLE = "Could not add product"
ERROR_NOT_FOUND = "Product does not exist in cart"

# i18n keys per user-facing error kind
MESSAGE_KEYS = {
    CartErrorKind.OUT_OF_STOCK: ("cart.out_of_stock", ERROR_OUT_OF_STOCK),
    CartErrorKind.PRODUCT_UNAVAILABLE: ("cart.product_unavailable", ERROR_PRODUCT_UNAVAILABLE),
    CartErrorKind.NOT_FOUND: ("cart.not_found", ERROR_NOT_FOUND),
}


class BackendError(Exception):
    """A remote read against the storefront API failed."""


class CartStorageError(Exception):
    """The durable cart slot could not be read or written."""
