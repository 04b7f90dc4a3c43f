"""URL routing for the back-office (mounted at /api/v1/admin/)."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from . import views

router = SimpleRouter()
router.register(r'users', views.AdminUserViewSet, basename='admin-user')
router.register(r'properties', views.AdminPropertyViewSet, basename='admin-property')
router.register(r'logs', views.SystemLogViewSet, basename='admin-log')

urlpatterns = [
    path('dashboard/', views.DashboardView.as_view(), name='admin-dashboard'),
    path('agents/', views.AgentListView.as_view(), name='admin-agents'),
    path('clear-all-data/', views.ClearAllDataView.as_view(), name='admin-clear-all-data'),
    path('generate-data/', views.SeedDataView.as_view(), name='admin-generate-data'),
    path('reseed/', views.SeedDataView.as_view(), name='admin-reseed'),
    path('', include(router.urls)),
]
