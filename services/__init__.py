"""
Service layer: identity, content and share-link operations.

Services raise errors from ``errors`` and never build HTTP responses.
"""
