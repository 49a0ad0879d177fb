"""Shared pytest fixtures for the storefront tests."""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.contrib.sessions.backends.signed_cookies import SessionStore
from rest_framework.test import APIClient

from cart.store import CartStore
from catalog.models import Category, Product


User = get_user_model()

PASSWORD = "s3cret-pass-123"


@pytest.fixture
def session():
    """An in-memory session; nothing touches the database."""
    return SessionStore()


@pytest.fixture
def cart(session):
    return CartStore(session)


@pytest.fixture
def user(db):
    return User.objects.create_user(email="shopper@example.com", name="Shopper", password=PASSWORD)


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email="staff@example.com", name="Staff", password=PASSWORD, is_staff=True
    )


@pytest.fixture
def seller(db):
    return User.objects.create_user(email="seller@example.com", name="Seller", password=PASSWORD)


@pytest.fixture
def category(db):
    return Category.objects.create(name="Electronics")


@pytest.fixture
def product(db, seller, category):
    return Product.objects.create(
        seller=seller,
        category=category,
        name="Desk Lamp",
        description="A lamp for the desk.",
        price=Decimal("10.00"),
    )


@pytest.fixture
def api_client():
    return APIClient()
