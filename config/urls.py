"""URL configuration for HomeHarbor.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/properties/', include('apps.properties.urls')),
    path('api/v1/locations/', include('apps.properties.location_urls')),
    path('api/v1/favorites/', include('apps.favorites.urls')),
    path('api/v1/messages/', include('apps.messaging.urls')),
    path('api/v1/settings/', include('apps.site_settings.urls')),
    path('api/v1/', include('apps.content.urls')),
    path('api/v1/neighborhoods/', include('apps.neighborhoods.urls')),
    path('api/v1/posts/', include('apps.blog.urls')),
    path('api/v1/', include('apps.insights.urls')),
    # Back-office API
    path('api/v1/admin/', include('apps.backoffice.urls')),
    # OpenAPI schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
