"""
Notification Service - transient user-facing messages for rejected cart operations.

The cart store publishes a CartNotification for every failed operation;
UI layers subscribe and show it however they like (toast, banner, log).
"""
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional

from rocketshoes.config import CART_LANGUAGE, NOTIFICATION_HISTORY
from rocketshoes.errors import MESSAGE_KEYS, CartErrorKind
from rocketshoes.i18n import get_text
from rocketshoes.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartNotification:
    """A human-readable message about a rejected cart operation."""
    kind: CartErrorKind
    message: str
    product_id: Optional[int] = None


Subscriber = Callable[[CartNotification], None]


def message_for(kind: CartErrorKind, lang: str = CART_LANGUAGE) -> str:
    """Translated message for an error kind."""
    key, default = MESSAGE_KEYS[kind]
    return get_text(key, lang, default=default)


class CartNotifier:
    """In-process notification channel with a short in-memory history."""

    def __init__(self, lang: str = CART_LANGUAGE, history: int = NOTIFICATION_HISTORY):
        self.lang = lang
        self._subscribers: List[Subscriber] = []
        self._recent: Deque[CartNotification] = deque(maxlen=history)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for new notifications.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def recent(self) -> List[CartNotification]:
        """Most recent notifications, oldest first."""
        return list(self._recent)

    def notify(self, kind: CartErrorKind, product_id: Optional[int] = None) -> Optional[CartNotification]:
        """
        Publish a notification for a user-facing error kind.

        Storage corruption is recovered silently and is never published.
        """
        if kind not in MESSAGE_KEYS:
            return None

        notification = CartNotification(kind=kind, message=message_for(kind, self.lang), product_id=product_id)
        self._recent.append(notification)
        logger.warning(f"Cart notification ({kind.value}) for product {product_id}: {notification.message}")

        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                logger.exception(f"Notification subscriber {callback!r} failed")

        return notification
