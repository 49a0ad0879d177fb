"""
Session-backed shopping cart.

The cart lives in the Django session as
``{item_id: {"name": str, "price": str, "quantity": int}}``. Name and price
are copied in when an item is added and never re-read from the catalog.

Mutations return a :class:`CartResult` instead of raising, so callers can tell
a validation problem from a missing line or an internal fault.
"""
import functools
import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum

from django.conf import settings

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
# largest value a Product.price column (max_digits=10, decimal_places=2) can hold
MAX_PRICE = Decimal("99999999.99")


class CartOutcome(Enum):
    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class CartValidationError(ValueError):
    pass


@dataclass(frozen=True)
class CartItem:
    id: str
    name: str
    price: Decimal
    quantity: int

    @property
    def subtotal(self):
        return self.price * self.quantity

    def to_session(self):
        return {"name": self.name, "price": str(self.price), "quantity": self.quantity}

    @classmethod
    def from_session(cls, item_id, data):
        return cls(
            id=item_id,
            name=data["name"],
            price=Decimal(data["price"]),
            quantity=int(data["quantity"]),
        )


@dataclass(frozen=True)
class CartResult:
    outcome: CartOutcome
    item: CartItem | None = None
    error: str = ""
    created: bool = False

    @property
    def ok(self):
        return self.outcome is CartOutcome.OK

    @classmethod
    def success(cls, item=None, created=False):
        return cls(CartOutcome.OK, item=item, created=created)

    @classmethod
    def invalid(cls, error):
        return cls(CartOutcome.INVALID, error=error)

    @classmethod
    def not_found(cls, error):
        return cls(CartOutcome.NOT_FOUND, error=error)

    @classmethod
    def failed(cls, error="Unexpected cart error"):
        return cls(CartOutcome.FAILED, error=error)


def parse_item_id(value):
    item_id = "" if value is None else str(value).strip()
    if not item_id:
        raise CartValidationError("Item id is required.")
    return item_id


def parse_name(value):
    name = "" if value is None else str(value).strip()
    if not name:
        raise CartValidationError("Item name is required.")
    return name


def parse_price(value):
    if value is None or isinstance(value, bool):
        raise CartValidationError("Price is required.")
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        raise CartValidationError(f"Price {value!r} is not a number.")
    if not price.is_finite():
        raise CartValidationError(f"Price {value!r} is not a number.")
    if price < 0:
        raise CartValidationError("Price cannot be negative.")
    if price > MAX_PRICE:
        raise CartValidationError(f"Price {value!r} is too large.")
    return price.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_quantity(value):
    """
    Coerce a submitted quantity to a positive int.

    Negative input is stored as its absolute value; zero is rejected.
    """
    if value is None or isinstance(value, bool):
        raise CartValidationError("Quantity is required.")
    if isinstance(value, int):
        quantity = value
    else:
        try:
            quantity = int(str(value).strip())
        except ValueError:
            raise CartValidationError(f"Quantity {value!r} is not a whole number.")
    quantity = abs(quantity)
    if quantity < 1:
        raise CartValidationError("Quantity must be at least 1.")
    return quantity


def _guarded(method):
    """Turn unexpected faults inside a cart mutation into a FAILED result."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except Exception:
            logger.exception("Cart %s failed", method.__name__)
            return CartResult.failed()

    return wrapper


class CartStore:
    """The cart of one session. Build one per request; never share it."""

    def __init__(self, session, key=None):
        self.session = session
        self.key = key or settings.CART_SESSION_KEY

    # storage

    def _load(self):
        raw = self.session.get(self.key)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning("Discarding malformed cart payload of type %s", type(raw).__name__)
            return {}
        cart = {}
        for item_id, data in raw.items():
            try:
                CartItem.from_session(item_id, data)
            except (KeyError, TypeError, ValueError, InvalidOperation):
                logger.warning("Discarding malformed cart line %r", item_id)
                continue
            cart[item_id] = data
        return cart

    def _save(self, cart):
        self.session[self.key] = cart
        self.session.modified = True

    # mutations

    @_guarded
    def add(self, item_id, name, price, quantity=1):
        try:
            item = CartItem(
                id=parse_item_id(item_id),
                name=parse_name(name),
                price=parse_price(price),
                quantity=parse_quantity(quantity),
            )
        except CartValidationError as exc:
            logger.error("Rejected cart add for item %r: %s", item_id, exc)
            return CartResult.invalid(str(exc))

        cart = self._load()
        existing = cart.get(item.id)
        if existing is not None:
            # merge: keep the first snapshot of name/price, add the quantities
            current = CartItem.from_session(item.id, existing)
            item = replace(current, quantity=current.quantity + item.quantity)
            logger.debug("Merged cart item %s, quantity now %d", item.id, item.quantity)

        cart[item.id] = item.to_session()
        self._save(cart)
        return CartResult.success(item, created=existing is None)

    @_guarded
    def remove(self, item_id):
        try:
            item_id = parse_item_id(item_id)
        except CartValidationError as exc:
            logger.error("Rejected cart remove: %s", exc)
            return CartResult.invalid(str(exc))

        cart = self._load()
        data = cart.pop(item_id, None)
        if data is None:
            return CartResult.success()
        self._save(cart)
        return CartResult.success(CartItem.from_session(item_id, data))

    @_guarded
    def update(self, item_id, quantity):
        try:
            item_id = parse_item_id(item_id)
            quantity = parse_quantity(quantity)
        except CartValidationError as exc:
            logger.error("Rejected cart update for item %r: %s", item_id, exc)
            return CartResult.invalid(str(exc))

        cart = self._load()
        if item_id not in cart:
            return CartResult.not_found(f"Item {item_id} is not in the cart.")

        item = replace(CartItem.from_session(item_id, cart[item_id]), quantity=quantity)
        cart[item_id] = item.to_session()
        self._save(cart)
        return CartResult.success(item)

    @_guarded
    def clear(self):
        self._save({})
        return CartResult.success()

    # queries

    def content(self):
        return [CartItem.from_session(item_id, data) for item_id, data in self._load().items()]

    def total(self):
        return sum((item.subtotal for item in self.content()), ZERO)

    @property
    def quantity(self):
        return sum(item.quantity for item in self.content())

    def __iter__(self):
        return iter(self.content())

    def __len__(self):
        return len(self._load())

    def __contains__(self, item_id):
        return str(item_id) in self._load()
