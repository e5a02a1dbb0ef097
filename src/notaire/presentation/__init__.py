"""
Presentation layer - HTTP API.
"""
