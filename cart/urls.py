from django.urls import path
from .views import CartAddView, CartClearView, CartListView, CartRemoveView, CartUpdateView

app_name = "cart"

urlpatterns = [
    path("", CartListView.as_view(), name="list"),
    path("add/", CartAddView.as_view(), name="add"),
    path("remove/", CartRemoveView.as_view(), name="remove"),
    path("update/", CartUpdateView.as_view(), name="update"),
    path("clear/", CartClearView.as_view(), name="clear"),
]
