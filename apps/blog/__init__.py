"""Blog app: articles published by the editorial team."""
