"""URL routing for site content (mounted at /api/v1/)."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import FooterContentViewSet, PageContentViewSet, StaticPageView

router = SimpleRouter()
router.register(r'footer', FooterContentViewSet, basename='footer')
router.register(r'page-content', PageContentViewSet, basename='page-content')

urlpatterns = [
    path('', include(router.urls)),
    path('pages/<slug:slug>/', StaticPageView.as_view(), name='static-page'),
]
