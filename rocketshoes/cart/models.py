"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Tuple

from rocketshoes.errors import CartErrorKind
from rocketshoes.models import Product
from rocketshoes.services.money import multiply, parse_money, round_money, to_decimal


@dataclass(frozen=True)
class CartItem:
    """A product plus the quantity requested. Identity is the product id."""
    id: int
    title: str
    price: Decimal
    image: str
    amount: int

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    @classmethod
    def from_product(cls, product: Product, amount: int = 1) -> "CartItem":
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            image=product.image,
            amount=amount,
        )

    @property
    def subtotal(self) -> Decimal:
        """Price for all requested units."""
        return round_money(multiply(self.price, self.amount))

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "price": str(self.price),
            "image": self.image,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from a stored dictionary.

        Raises KeyError/TypeError/ValueError on malformed data. Prices
        may be stored as strings or numbers.
        """
        item_id = data["id"]
        amount = data["amount"]
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise TypeError(f"Invalid product id: {item_id!r}")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Invalid amount: {amount!r}")
        return cls(
            id=item_id,
            title=str(data["title"]),
            price=parse_money(data["price"]),
            image=str(data["image"]),
            amount=amount,
        )


@dataclass(frozen=True)
class Cart:
    """
    Insertion-ordered line items, at most one per product id.

    Carts are immutable snapshots: every mutation builds a new Cart.
    """
    items: Tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("Cart contains duplicate product ids")

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, product_id: object) -> bool:
        return any(item.id == product_id for item in self.items)

    def find(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == product_id), None)

    def amounts(self) -> Dict[int, int]:
        """Requested amount per product id."""
        return {item.id: item.amount for item in self.items}

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(item.amount for item in self.items)

    @property
    def total(self) -> Decimal:
        return round_money(sum((item.subtotal for item in self.items), Decimal("0")))

    def with_amount(self, product_id: int, amount: int) -> "Cart":
        """Replace one item's amount, keeping its position."""
        return Cart(tuple(
            replace(item, amount=amount) if item.id == product_id else item
            for item in self.items
        ))

    def appended(self, item: CartItem) -> "Cart":
        return Cart(self.items + (item,))

    def without(self, product_id: int) -> "Cart":
        return Cart(tuple(item for item in self.items if item.id != product_id))

    def to_list(self) -> List[dict]:
        """Convert to the stored JSON array."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: list) -> "Cart":
        """Create from a stored JSON array."""
        if not isinstance(data, list):
            raise TypeError(f"Stored cart must be a list, got {type(data).__name__}")
        return cls(tuple(CartItem.from_dict(item) for item in data))


@dataclass(frozen=True)
class CartResult:
    """
    Outcome of a cart operation.

    `cart` is the state after the operation: the new cart on success,
    the unchanged cart on failure.
    """
    cart: Cart
    error: Optional[CartErrorKind] = None
    product_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, cart: Cart, product_id: Optional[int] = None) -> "CartResult":
        return cls(cart=cart, product_id=product_id)

    @classmethod
    def failure(cls, cart: Cart, error: CartErrorKind, product_id: Optional[int] = None) -> "CartResult":
        return cls(cart=cart, error=error, product_id=product_id)
