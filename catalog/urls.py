from django.urls import path
from .views import CategoryProductsView, HomeView, ProductDetailView

app_name = "catalog"

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("product/<int:pk>/", ProductDetailView.as_view(), name="detail"),
    path("products/category/<int:pk>/", CategoryProductsView.as_view(), name="category"),
]
