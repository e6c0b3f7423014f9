"""
Cart store: the single source of truth for the shopper's cart.

Ordering: add_product and update_product_amount read `self.cart` when
they start, await the stock and product reads, then build, assign and
persist the new cart without yielding to the event loop. A single
operation is therefore never interleaved with another one's write, but
two operations started before either resolves both compute from the
same starting cart, and the one that resolves last wins (lost update).
Calls are not serialized beyond normal event-loop ordering.
"""
from typing import Optional

from rocketshoes.errors import BackendError, CartErrorKind, CartStorageError
from rocketshoes.logging import get_logger, sanitize_string_for_logging
from rocketshoes.services.api import StorefrontAPI
from rocketshoes.services.notifications import CartNotifier
from rocketshoes.services.stock import StockOracle

from .models import Cart, CartItem, CartResult
from .storage import CartStorage, build_slot

logger = get_logger(__name__)


class CartStore:
    """
    Owns the in-memory cart and its three mutation operations.

    Operations never raise: each returns a CartResult and, on failure,
    publishes a notification and leaves the cart untouched.
    """

    def __init__(
        self,
        api: StorefrontAPI,
        storage: CartStorage,
        notifier: Optional[CartNotifier] = None,
        stock_oracle: Optional[StockOracle] = None,
    ):
        self.api = api
        self.storage = storage
        self.notifier = notifier or CartNotifier()
        self.stock = stock_oracle or StockOracle(api)
        self._cart = storage.load()

    @property
    def cart(self) -> Cart:
        """Current cart snapshot (read-only)."""
        return self._cart

    async def aclose(self) -> None:
        """Close the backend client. The cart itself needs no teardown."""
        await self.api.aclose()

    async def add_product(self, product_id: int) -> CartResult:
        """Add one unit of a product, creating its line item if needed."""
        item = self._cart.find(product_id)
        current_amount = item.amount if item else 0
        return await self.update_product_amount(product_id=product_id, amount=current_amount + 1)

    def remove_product(self, product_id: int) -> CartResult:
        """Delete a product's line item."""
        cart = self._cart
        if product_id not in cart:
            return self._reject(CartErrorKind.NOT_FOUND, product_id)
        logger.info(f"Removing product {product_id} from cart")
        return self._commit(cart.without(product_id), product_id)

    async def update_product_amount(self, *, product_id: int, amount: int) -> CartResult:
        """
        Set a product's amount after checking stock.

        Amounts are applied as given (no floor of 1); callers compute
        current +/- 1 themselves. A product not yet in the cart is
        appended with amount 1 whatever `amount` was requested.
        """
        cart = self._cart

        try:
            in_stock = await self.stock.check_availability(product_id, amount)
        except BackendError as e:
            # Fail closed: unverifiable stock counts as insufficient
            logger.warning(f"Stock read failed for product {product_id}: {e}")
            in_stock = False
        if not in_stock:
            return self._reject(CartErrorKind.OUT_OF_STOCK, product_id)

        try:
            product = await self.api.get_product(product_id)
        except BackendError as e:
            logger.warning(f"Product read failed for product {product_id}: {e}")
            product = None
        if product is None or product.id != product_id:
            if product is not None:
                logger.warning(f"Backend answered product {product.id} for product {product_id}")
            return self._reject(CartErrorKind.PRODUCT_UNAVAILABLE, product_id)

        if product_id in cart:
            new_cart = cart.with_amount(product_id, amount)
        else:
            logger.info(
                f"Adding product {product_id} "
                f"({sanitize_string_for_logging(product.title)}) to cart"
            )
            new_cart = cart.appended(CartItem.from_product(product, amount=1))
        return self._commit(new_cart, product_id)

    def _commit(self, cart: Cart, product_id: int) -> CartResult:
        self._cart = cart
        try:
            self.storage.save(cart)
        except CartStorageError:
            # The change stays in memory; it just won't survive a restart
            logger.exception("Failed to persist cart")
        return CartResult.success(cart, product_id)

    def _reject(self, kind: CartErrorKind, product_id: int) -> CartResult:
        self.notifier.notify(kind, product_id)
        return CartResult.failure(self._cart, kind, product_id)


def build_cart_store(
    api: Optional[StorefrontAPI] = None,
    storage: Optional[CartStorage] = None,
    notifier: Optional[CartNotifier] = None,
) -> CartStore:
    """
    Build a CartStore from environment configuration.

    There is no module-level singleton: create one store per session,
    hand it to the views that need it, and `await store.aclose()` when
    the session ends.
    """
    return CartStore(
        api=api or StorefrontAPI(),
        storage=storage or CartStorage(build_slot()),
        notifier=notifier,
    )
