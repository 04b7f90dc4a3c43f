"""URL routing for authentication endpoints (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_views import (
    FirebaseAuthView,
    LoginView,
    LogoutView,
    RegisterView,
)

app_name = "auth"

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("firebase-auth/", FirebaseAuthView.as_view(), name="firebase-auth"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
