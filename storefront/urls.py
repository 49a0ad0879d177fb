"""
URL configuration for the storefront project.

Server-rendered pages live at the root; the JSON API lives under /api/v1/.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    # must come before the Django admin, which would otherwise claim admin/dashboard/
    path("admin/dashboard/", include("dashboard.urls")),
    path("admin/", admin.site.urls),
    path("", include("catalog.urls")),
    path("cart/", include("cart.urls")),
    path("", include("user.urls")),
    path("api/v1/", include("catalog.api_urls")),
    path("api/v1/cart/", include("cart.api_urls")),
    path("api/v1/user/", include("user.api_urls")),
    path("api/v1/admin/", include("dashboard.api_urls")),
    path("api/v1/schema/", SpectacularAPIView.as_view(), name="schema"),  # OpenAPI JSON/YAML
    path("api/v1/schema/swagger-ui/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/v1/schema/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
