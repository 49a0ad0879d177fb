from rest_framework import serializers
from .models import Product, Category


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ("id", "name", "slug")


class ProductMiniSerializer(serializers.ModelSerializer):
    # minimal product shape for lists and the admin listing
    category = serializers.CharField(source="category.name", read_only=True)

    class Meta:
        model = Product
        fields = ("id", "name", "slug", "price", "category")


class ProductSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)
    category_id = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(), source="category", write_only=True
    )
    seller = serializers.StringRelatedField(read_only=True)
    image = serializers.ImageField(required=False, allow_null=True)

    class Meta:
        model = Product
        fields = (
            "id", "name", "slug", "description", "price", "image",
            "category", "category_id", "seller", "created_at", "updated_at",
        )
        read_only_fields = ("slug", "created_at", "updated_at")
