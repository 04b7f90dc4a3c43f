"""URL routing for neighborhoods."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import NeighborhoodViewSet

router = DefaultRouter()
router.register(r'', NeighborhoodViewSet, basename='neighborhood')

urlpatterns = [path('', include(router.urls))]
