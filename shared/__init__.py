"""
Shared Kernel

Building blocks reused by every domain app: API exceptions, permission
classes, page/limit pagination and geographic helpers.
"""
