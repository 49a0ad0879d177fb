"""Context processors for the catalog."""

from .models import Category


def categories_menu(request):
    """Categories for the navigation dropdown."""
    return {"categories_menu": Category.objects.only("id", "name").order_by("name")}
