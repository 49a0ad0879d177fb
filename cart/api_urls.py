
from django.urls import path
from .views import CartAPIView, CartItemAPIView

urlpatterns = [
    path("", CartAPIView.as_view(), name="cart-api"),
    path("<str:item_id>/", CartItemAPIView.as_view(), name="cart-item-api"),
]
