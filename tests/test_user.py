"""Tests for login/logout pages and the JWT cookie API."""

import pytest
from django.contrib.messages import constants, get_messages
from django.urls import reverse

from cart.store import CartStore


pytestmark = pytest.mark.django_db

PASSWORD = "s3cret-pass-123"


def test_login_page_renders(client):
    response = client.get(reverse("user:login"), {"next": "/cart/"})

    assert response.status_code == 200
    assert response.context["next"] == "/cart/"


def test_login_success_redirects_home(client, user):
    response = client.post(reverse("user:login"), {"email": user.email, "password": PASSWORD})

    assert response.status_code == 302
    assert response.url == reverse("catalog:home")
    assert response.wsgi_request.user == user


def test_login_follows_safe_next(client, user):
    response = client.post(
        reverse("user:login"), {"email": user.email, "password": PASSWORD, "next": "/cart/"}
    )

    assert response.url == "/cart/"


def test_login_ignores_foreign_next(client, user):
    response = client.post(
        reverse("user:login"),
        {"email": user.email, "password": PASSWORD, "next": "https://evil.example.com/"},
    )

    assert response.url == reverse("catalog:home")


def test_wrong_password_flashes_error(client, user):
    response = client.post(reverse("user:login"), {"email": user.email, "password": "nope"})

    assert response.url == reverse("user:login")
    [message] = get_messages(response.wsgi_request)
    assert message.level == constants.ERROR
    assert "_auth_user_id" not in client.session


def test_malformed_email_flashes_error(client):
    response = client.post(reverse("user:login"), {"email": "not-an-email", "password": "x"})

    assert response.status_code == 302
    [message] = get_messages(response.wsgi_request)
    assert message.level == constants.ERROR


def test_login_keeps_the_cart(client, user):
    client.post(reverse("cart:add"), {"id": "1", "name": "Desk Lamp", "price": "10.00", "quantity": 2})

    client.post(reverse("user:login"), {"email": user.email, "password": PASSWORD})

    assert CartStore(client.session).content()[0].quantity == 2


def test_logout_drops_session_and_cart(client, user):
    client.force_login(user)
    client.post(reverse("cart:add"), {"id": "1", "name": "Desk Lamp", "price": "10.00", "quantity": 1})

    response = client.get(reverse("user:logout"))

    assert response.url == reverse("catalog:home")
    assert len(CartStore(client.session)) == 0
    assert "_auth_user_id" not in client.session


class TestAPI:
    def test_login_sets_jwt_cookies(self, api_client, user):
        response = api_client.post(
            "/api/v1/user/login/", {"email": user.email, "password": PASSWORD}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == user.email
        assert response.cookies["access_token"]["httponly"]
        assert response.cookies["refresh_token"].value

    def test_bad_credentials(self, api_client, user):
        response = api_client.post(
            "/api/v1/user/login/", {"email": user.email, "password": "wrong"}, format="json"
        )

        assert response.status_code == 401

    def test_profile_uses_access_cookie(self, api_client, user):
        api_client.post("/api/v1/user/login/", {"email": user.email, "password": PASSWORD}, format="json")

        response = api_client.get("/api/v1/user/profile/")

        assert response.status_code == 200
        assert response.json() == {"id": user.pk, "email": user.email, "name": "Shopper", "is_staff": False}

    def test_profile_requires_auth(self, api_client):
        assert api_client.get("/api/v1/user/profile/").status_code == 401

    def test_logout_clears_cookies(self, api_client, user):
        api_client.post("/api/v1/user/login/", {"email": user.email, "password": PASSWORD}, format="json")

        response = api_client.post("/api/v1/user/logout/")

        assert response.status_code == 200
        assert response.cookies["access_token"].value == ""


class TestUserManager:
    def test_create_user_requires_email(self):
        from user.models import User

        with pytest.raises(ValueError):
            User.objects.create_user(email="", name="Nobody", password="x")

    def test_create_superuser(self):
        from user.models import User

        admin = User.objects.create_superuser(email="root@example.com", password="x")

        assert admin.is_staff and admin.is_superuser
        assert admin.name == "Admin"
        assert str(admin) == "root@example.com"
