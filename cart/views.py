from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _
from django.views import View
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import CartSerializer
from .store import CartOutcome


def _redirect_back(request, fallback="cart:list"):
    referer = request.META.get("HTTP_REFERER")
    if referer and url_has_allowed_host_and_scheme(
        referer, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return redirect(referer)
    return redirect(fallback)


def _flash_failure(request, result, generic):
    """Validation and not-found errors carry their own detail; faults stay generic."""
    if result.outcome in (CartOutcome.INVALID, CartOutcome.NOT_FOUND) and result.error:
        messages.error(request, f"{generic} {result.error}")
    else:
        messages.error(request, generic)


# ---- HTML ----

class CartAddView(View):
    def post(self, request):
        result = request.cart.add(
            request.POST.get("id"),
            request.POST.get("name"),
            request.POST.get("price"),
            request.POST.get("quantity", 1),
        )
        if result.ok:
            messages.success(request, _("Added to cart successfully!"))
            return redirect("cart:list")
        _flash_failure(request, result, _("An error occurred while adding to the cart."))
        return _redirect_back(request)


class CartListView(CartAddView):
    """GET lists the cart; POST to the same URL adds a line."""

    template_name = "cart/cart.html"

    def get(self, request):
        cart = request.cart
        return render(request, self.template_name, {
            "items": cart.content(),
            "total": cart.total(),
        })


class CartRemoveView(View):
    def post(self, request):
        result = request.cart.remove(request.POST.get("id"))
        if result.ok:
            messages.success(request, _("Product removed successfully!"))
        else:
            _flash_failure(request, result, _("An error occurred while removing the product from the cart."))
        return _redirect_back(request)


class CartUpdateView(View):
    def post(self, request):
        result = request.cart.update(request.POST.get("id"), request.POST.get("quantity"))
        if result.ok:
            messages.success(request, _("Product updated successfully!"))
        else:
            _flash_failure(request, result, _("Error updating the product!"))
        return _redirect_back(request)


class CartClearView(View):
    def get(self, request):
        result = request.cart.clear()
        if result.ok:
            messages.warning(request, _("Cart is empty!"))
        else:
            _flash_failure(request, result, _("Something went wrong while emptying the cart!"))
        return _redirect_back(request)


# ---- API ----

STATUS_FOR_OUTCOME = {
    CartOutcome.INVALID: status.HTTP_400_BAD_REQUEST,
    CartOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CartOutcome.FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _cart_response(request, result, success_status=status.HTTP_200_OK):
    if not result.ok:
        return Response({"detail": result.error}, status=STATUS_FOR_OUTCOME[result.outcome])
    return Response(CartSerializer(request.cart).data, status=success_status)


class CartAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, format=None):
        return Response(CartSerializer(request.cart).data, status=status.HTTP_200_OK)

    def post(self, request, format=None):
        """
        Expected payload:
        {
            "id": <product id>,
            "name": "Lamp",
            "price": "19.90",
            "quantity": <int>
        }
        """
        data = request.data
        result = request.cart.add(
            data.get("id"), data.get("name"), data.get("price"), data.get("quantity", 1)
        )
        return _cart_response(
            request, result,
            status.HTTP_201_CREATED if result.created else status.HTTP_200_OK,
        )

    def delete(self, request, format=None):
        return _cart_response(request, request.cart.clear())


class CartItemAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    def patch(self, request, item_id, format=None):
        """Replace the quantity of one line."""
        quantity = request.data.get("quantity")
        return _cart_response(request, request.cart.update(item_id, quantity))

    def delete(self, request, item_id, format=None):
        return _cart_response(request, request.cart.remove(item_id))
