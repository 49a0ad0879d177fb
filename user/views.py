# user/views.py
import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.shortcuts import redirect, render, resolve_url
from django.conf import settings
from django.utils.http import url_has_allowed_host_and_scheme, urlencode
from django.utils.translation import gettext as _
from django.views import View
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from storefront.middleware.jwt_cookie_middleware import ACCESS_COOKIE, REFRESH_COOKIE
from .serializers import LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


def _safe_next(request, candidate):
    if candidate and url_has_allowed_host_and_scheme(
        candidate, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return candidate
    return resolve_url(settings.LOGIN_REDIRECT_URL)


def _back_to_form(request, next_url):
    if next_url:
        return redirect(f"{request.path}?{urlencode({'next': next_url})}")
    return redirect(request.path)


class LoginView(View):
    template_name = "user/login.html"

    def get(self, request):
        return render(request, self.template_name, {"next": request.GET.get("next", "")})

    def post(self, request):
        serializer = LoginSerializer(data=request.POST)
        next_url = request.POST.get("next", "")
        if not serializer.is_valid():
            messages.error(request, _("Invalid e-mail or password!"))
            return _back_to_form(request, next_url)

        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login for %s", serializer.validated_data["email"])
            messages.error(request, _("Login failed!"))
            return _back_to_form(request, next_url)

        # login() rotates the session key and keeps the cart that is already in it
        login(request, user)
        return redirect(_safe_next(request, next_url))


class LogoutView(View):
    def get(self, request):
        logout(request)
        response = redirect(settings.LOGOUT_REDIRECT_URL)
        response.delete_cookie(ACCESS_COOKIE)
        response.delete_cookie(REFRESH_COOKIE)
        return response


class LoginAPIView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)

        refresh = RefreshToken.for_user(user)
        jwt_settings = settings.SIMPLE_JWT

        response = Response(
            {"message": "Login successful", "user": UserSerializer(user).data},
            status=status.HTTP_200_OK,
        )
        response.set_cookie(
            key=ACCESS_COOKIE,
            value=str(refresh.access_token),
            httponly=True,
            secure=not settings.DEBUG and request.is_secure(),
            samesite="Lax",
            max_age=int(jwt_settings["ACCESS_TOKEN_LIFETIME"].total_seconds()),
        )
        response.set_cookie(
            key=REFRESH_COOKIE,
            value=str(refresh),
            httponly=True,
            secure=not settings.DEBUG and request.is_secure(),
            samesite="Lax",
            max_age=int(jwt_settings["REFRESH_TOKEN_LIFETIME"].total_seconds()),
        )
        return response


class LogoutAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        response = Response({"message": "Logged out"}, status=status.HTTP_200_OK)
        response.delete_cookie(ACCESS_COOKIE)
        response.delete_cookie(REFRESH_COOKIE)
        return response


class ProfileAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
