"""Favorites app: per-user bookmarks of property listings."""
