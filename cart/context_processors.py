"""Context processors for the cart."""

from .store import CartStore


def cart_context(request):
    """Line count for the navigation badge."""
    cart = getattr(request, "cart", None)
    if cart is None:
        session = getattr(request, "session", None)
        if session is None:
            return {"cart_count": 0}
        cart = CartStore(session)
    return {"cart_count": len(cart)}
