"""
FastAPI routes, dependencies and middleware.
"""
