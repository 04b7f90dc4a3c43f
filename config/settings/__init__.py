"""Settings package for the HomeHarbor project.

`base.py` holds configuration shared across environments and reads its
values from the process environment (optionally seeded from `.env`).
`dev.py` and `prod.py` extend it with environment specific overrides.
"""
