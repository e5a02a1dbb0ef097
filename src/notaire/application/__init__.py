"""
Application layer - use cases and request validation.
"""
