from django.contrib.auth import get_user_model
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.views.generic import TemplateView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from catalog.models import Category, Product
from .serializers import AdminProductSerializer, AdminUserSerializer

User = get_user_model()


class StaffRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Anonymous users go to the login page; signed-in non-staff get a 403."""

    def test_func(self):
        return self.request.user.is_staff


class DashboardView(StaffRequiredMixin, TemplateView):
    template_name = "dashboard/index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["product_count"] = Product.objects.count()
        context["category_count"] = Category.objects.count()
        context["user_count"] = User.objects.count()
        context["latest_products"] = Product.objects.select_related("category", "seller")[:5]
        return context


# ---- USERS ----
@api_view(["GET"])
@permission_classes([IsAdminUser])
def admin_users(request):
    qs = User.objects.all().order_by("-id")
    return Response(AdminUserSerializer(qs, many=True).data)


# ---- PRODUCTS ----
@api_view(["GET"])
@permission_classes([IsAdminUser])
def admin_products(request):
    qs = Product.objects.select_related("category", "seller").order_by("-created_at", "-id")
    return Response(AdminProductSerializer(qs, many=True).data)
