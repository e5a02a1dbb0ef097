"""
Notaire domain layer.
"""
