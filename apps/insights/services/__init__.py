"""Clients for the external data sources used by the insights app."""
