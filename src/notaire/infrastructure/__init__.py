"""
Infrastructure layer - crypto, auth, persistence and monitoring adapters.
"""
