"""
Users API root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user domain model and the MongoDB-backed user repository.
"""
