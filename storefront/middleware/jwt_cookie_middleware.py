from django.utils.deprecation import MiddlewareMixin

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"


class JWTAuthCookieMiddleware(MiddlewareMixin):
    """Expose the httponly access cookie to DRF's JWTAuthentication."""

    def process_request(self, request):
        if "HTTP_AUTHORIZATION" in request.META:
            return None
        token = request.COOKIES.get(ACCESS_COOKIE)
        if token:
            request.META["HTTP_AUTHORIZATION"] = f"Bearer {token}"
        return None
