"""
Notaire - Web3 message signature verification service.
"""

__version__ = "1.0.0"
