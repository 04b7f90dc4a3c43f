"""Back-office app.

Admin-only API for the platform team: dashboard counters, user and
listing moderation, catalogue wipe/reseed and the persisted system log.
"""
