"""
Persistence adapters.

Services depend on these repositories rather than opening sessions or
building queries themselves.
"""
