"""Tests for catalog pages, API and seed command."""

from decimal import Decimal

import pytest
from django.core.management import call_command
from django.urls import reverse

from catalog.models import Category, Product


pytestmark = pytest.mark.django_db


def make_products(seller, category, count):
    return [
        Product.objects.create(
            seller=seller, category=category, name=f"Item {i}", price=Decimal("1.00") + i
        )
        for i in range(count)
    ]


class TestModels:
    def test_slugs_are_generated_and_unique(self, seller, category):
        first = Product.objects.create(seller=seller, category=category, name="Desk Lamp", price=1)
        second = Product.objects.create(seller=seller, category=category, name="Desk Lamp", price=2)

        assert first.slug == "desk-lamp"
        assert second.slug == "desk-lamp-1"
        assert category.slug == "electronics"

    def test_deleting_seller_cascades(self, product, seller):
        seller.delete()

        assert not Product.objects.filter(pk=product.pk).exists()

    def test_deleting_category_cascades(self, product, category):
        category.delete()

        assert not Product.objects.exists()


class TestPages:
    def test_home_is_paginated_by_six(self, client, seller, category):
        make_products(seller, category, 7)

        first = client.get(reverse("catalog:home"))
        second = client.get(reverse("catalog:home"), {"page": 2})

        assert first.status_code == 200
        assert len(first.context["products"]) == 6
        assert len(second.context["products"]) == 1

    def test_detail_shows_product_and_add_form(self, client, product):
        response = client.get(reverse("catalog:detail", args=[product.pk]))

        assert response.status_code == 200
        content = response.content.decode()
        assert "Desk Lamp" in content
        assert "Seller: Seller" in content
        assert 'name="price" value="10.00"' in content

    def test_unknown_product_is_404(self, client):
        assert client.get(reverse("catalog:detail", args=[404])).status_code == 404

    def test_category_page_lists_only_its_products(self, client, product, seller):
        other = Category.objects.create(name="Books")
        Product.objects.create(seller=seller, category=other, name="Novel", price=5)

        response = client.get(reverse("catalog:category", args=[other.pk]))

        assert response.context["category"] == other
        assert [p.name for p in response.context["products"]] == ["Novel"]

    def test_unknown_category_is_404(self, client):
        assert client.get(reverse("catalog:category", args=[999])).status_code == 404

    def test_categories_menu_on_every_page(self, client, category):
        response = client.get(reverse("cart:list"))

        assert list(response.context["categories_menu"]) == [category]
        assert reverse("catalog:category", args=[category.pk]) in response.content.decode()


class TestAPI:
    def test_product_list_is_public(self, api_client, product):
        response = api_client.get("/api/v1/products/")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["results"][0]["name"] == "Desk Lamp"
        assert body["results"][0]["category"]["name"] == "Electronics"

    def test_filter_by_category(self, api_client, product, seller):
        other = Category.objects.create(name="Books")
        Product.objects.create(seller=seller, category=other, name="Novel", price=5)

        body = api_client.get("/api/v1/products/", {"category": other.pk}).json()

        assert [p["name"] for p in body["results"]] == ["Novel"]

    def test_mini_list(self, api_client, product):
        body = api_client.get("/api/v1/products/mini/").json()

        assert body["results"][0] == {
            "id": product.pk,
            "name": "Desk Lamp",
            "slug": "desk-lamp",
            "price": "10.00",
            "category": "Electronics",
        }

    def test_anonymous_cannot_create(self, api_client, category):
        response = api_client.post(
            "/api/v1/products/", {"name": "X", "price": "1.00", "category_id": category.pk}, format="json"
        )

        assert response.status_code in (401, 403)

    def test_staff_create_sets_seller(self, api_client, staff_user, category):
        api_client.force_authenticate(staff_user)

        response = api_client.post(
            "/api/v1/products/",
            {"name": "Speaker", "price": "45.00", "category_id": category.pk},
            format="json",
        )

        assert response.status_code == 201
        assert Product.objects.get(name="Speaker").seller == staff_user

    def test_categories_list(self, api_client, category):
        body = api_client.get("/api/v1/categories/").json()

        assert body["results"] == [{"id": category.pk, "name": "Electronics", "slug": "electronics"}]


class TestSeedCommand:
    def test_seeds_seller_categories_and_products(self):
        call_command("seed_catalog", products=5, seed=1)

        assert Product.objects.count() == 5
        assert Category.objects.count() == 5
        assert len(set(Product.objects.values_list("seller_id", flat=True))) == 1

    def test_rerun_is_additive_unless_forced(self):
        call_command("seed_catalog", products=3, seed=1)
        call_command("seed_catalog", products=3, seed=2)
        assert Product.objects.count() == 6

        call_command("seed_catalog", products=2, force=True)
        assert Product.objects.count() == 2
        assert Category.objects.count() == 5
