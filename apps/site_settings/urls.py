"""URL routing for site settings."""

from django.urls import path  # type: ignore

from .views import SiteSettingView

urlpatterns = [
    path('<slug:key>/', SiteSettingView.as_view(), name='site-settings'),
]
