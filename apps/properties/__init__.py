"""Property listings and the locations they are grouped under.

Search filters (price, type, bedrooms, amenities, radius) live in
``filters``; Statistics Finland municipality codes in ``municipalities``.
"""
