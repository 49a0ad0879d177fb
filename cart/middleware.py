from django.utils.deprecation import MiddlewareMixin

from .store import CartStore


class CartMiddleware(MiddlewareMixin):
    """Attach the session's cart to ``request.cart``. Needs SessionMiddleware first."""

    def process_request(self, request):
        request.cart = CartStore(request.session)
        return None
