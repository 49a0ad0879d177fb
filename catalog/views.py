from django.conf import settings
from django.shortcuts import get_object_or_404
from django.views.generic import DetailView, ListView
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import permissions, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from .models import Category, Product
from .serializers import CategorySerializer, ProductMiniSerializer, ProductSerializer


class HomeView(ListView):
    """Storefront landing page: every product, newest first."""

    template_name = "catalog/home.html"
    context_object_name = "products"
    paginate_by = settings.CATALOG_PAGE_SIZE

    def get_queryset(self):
        return Product.objects.select_related("category")


class ProductDetailView(DetailView):
    template_name = "catalog/details.html"
    context_object_name = "product"

    def get_queryset(self):
        return Product.objects.select_related("category", "seller")


class CategoryProductsView(ListView):
    template_name = "catalog/category.html"
    context_object_name = "products"
    paginate_by = settings.CATALOG_PAGE_SIZE

    def get_queryset(self):
        self.category = get_object_or_404(Category, pk=self.kwargs["pk"])
        return self.category.products.select_related("category")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["category"] = self.category
        return context


class ReadOnlyOrAdminMixin:
    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAdminUser()]


class CategoryViewSet(ReadOnlyOrAdminMixin, viewsets.ModelViewSet):
    queryset = Category.objects.all().order_by("name")
    serializer_class = CategorySerializer


class ProductViewSet(ReadOnlyOrAdminMixin, viewsets.ModelViewSet):
    queryset = Product.objects.all().select_related("category", "seller")
    serializer_class = ProductSerializer
    parser_classes = (MultiPartParser, FormParser, JSONParser)
    filter_backends = [DjangoFilterBackend, OrderingFilter, SearchFilter]

    filterset_fields = {
        "category__slug": ["exact"],
        "category": ["exact"],
    }
    ordering_fields = ["created_at", "price", "name"]
    search_fields = ["name", "description", "category__name"]

    def perform_create(self, serializer):
        serializer.save(seller=self.request.user)

    @action(detail=False, methods=["get"])
    def mini(self, request):
        """
        Lightweight list for clients that only need a small product shape.
        GET /api/v1/products/mini/
        """
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        serializer = ProductMiniSerializer(page if page is not None else qs, many=True)
        if page is not None:
            return self.get_paginated_response(serializer.data)
        return Response(serializer.data)
