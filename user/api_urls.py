from django.urls import path
from .views import LoginAPIView, LogoutAPIView, ProfileAPIView

urlpatterns = [
    path("login/", LoginAPIView.as_view(), name="api-login"),
    path("logout/", LogoutAPIView.as_view(), name="api-logout"),
    path("profile/", ProfileAPIView.as_view(), name="api-profile"),
]
