"""Neighborhoods app: district guides with price and livability scores."""
