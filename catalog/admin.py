# catalog/admin.py
from django.contrib import admin
from .models import Product, Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    search_fields = ("name",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "seller", "price", "created_at")
    list_filter = ("category",)
    search_fields = ("name", "category__name", "seller__email")
    prepopulated_fields = {"slug": ("name",)}
    list_select_related = ("category", "seller")
