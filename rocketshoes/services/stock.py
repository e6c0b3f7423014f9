"""Stock availability checks against the backend."""

from rocketshoes.logging import get_logger
from rocketshoes.services.api import StorefrontAPI

logger = get_logger(__name__)


class StockOracle:
    """
    Answers "can this many units be requested?" with a fresh remote read.

    There is no caching: stock may change between two checks. Errors
    from the read (BackendError) propagate to the caller, which decides
    how to fail.
    """

    def __init__(self, api: StorefrontAPI):
        self.api = api

    async def check_availability(self, product_id: int, requested_amount: int) -> bool:
        stock = await self.api.get_stock(product_id)
        available = stock.amount >= requested_amount
        if not available:
            logger.info(
                f"Stock check failed for product {product_id}: "
                f"requested={requested_amount}, available={stock.amount}"
            )
        return available
