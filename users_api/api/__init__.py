"""
API layer for the Users API.

Exposes the user HTTP endpoints (list, get, update, add).
"""
