"""
Core utilities shared across the contactbook app.

This package hosts configuration helpers (env vars) and cross-cutting
concerns such as logging. Routers and services depend on these primitives
instead of reading os.environ themselves.
"""
