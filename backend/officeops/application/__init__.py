"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- common/          → Command/Query interfaces, request router, event dispatcher, unit of work
- commands/        → Write operations (CQRS)
- queries/         → Read operations (CQRS)
- event_handlers/  → Domain event listeners
- dto/             → Data Transfer Objects

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Every handler returns a Result; no exception crosses the router
"""
