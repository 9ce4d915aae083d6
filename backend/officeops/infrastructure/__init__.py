"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: in-memory store, transaction and repository implementations
"""
