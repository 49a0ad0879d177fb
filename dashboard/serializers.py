from rest_framework import serializers
from django.contrib.auth import get_user_model
from catalog.models import Product
from catalog.serializers import CategorySerializer
User = get_user_model()


# ---- USERS ----
class AdminUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "name", "email", "is_staff", "is_superuser", "is_active", "date_joined")


# ---- PRODUCTS ----
class AdminProductSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)
    seller = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "price", "category", "seller", "created_at"]
