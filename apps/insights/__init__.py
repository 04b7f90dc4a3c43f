"""Insights app: crime statistics and third-party neighbourhood data.

Integrations with Statistics Finland (PxWeb crime tables), the Oulu
open data portal (CKAN), the ZoneAtlas attraction feed and Google
Places. Crime figures are synced into ``CrimeRecord`` by a nightly
Celery beat task; the other sources are proxied on request.
"""
