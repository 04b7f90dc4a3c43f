"""URL routing for insights (mounted at /api/v1/)."""

from django.urls import path  # type: ignore

from . import views

urlpatterns = [
    path('crime-rate/', views.CrimeRateView.as_view(), name='crime-rate'),
    path('oulu/datasets/', views.OuluDatasetListView.as_view(), name='oulu-datasets'),
    path('oulu/datasets/<str:dataset_id>/', views.OuluDatasetDetailView.as_view(), name='oulu-dataset-detail'),
    path('oulu/search/', views.OuluSearchView.as_view(), name='oulu-search'),
    path('oulu/resources/<str:resource_id>/', views.OuluResourceView.as_view(), name='oulu-resource'),
    path('oulu/property-prices/', views.OuluPropertyPricesView.as_view(), name='oulu-property-prices'),
    path('attractions/nearby/', views.NearbyAttractionsView.as_view(), name='attractions-nearby'),
    path('places/nearby/', views.NearbyPlacesView.as_view(), name='places-nearby'),
]
