"""
Presentation Layer - HTTP adapter over the request router.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: request-level dependencies (caller identity)
"""
