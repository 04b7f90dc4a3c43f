"""Routes for /api/v1/favorites/.

Favorites are addressed by property id: ``DELETE /favorites/{property_id}/``
and ``GET /favorites/check/{property_id}/``.
"""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import FavoriteViewSet

router = SimpleRouter()
router.register(r'', FavoriteViewSet, basename='favorite')

urlpatterns = [path('', include(router.urls))]
