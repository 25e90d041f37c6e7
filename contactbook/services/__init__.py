"""
Use cases for the contactbook app.

Routers call these services instead of opening database sessions or issuing
HTTP requests directly.
"""
