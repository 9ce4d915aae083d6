"""
DOMAIN LAYER - The Heart of Your Application

This layer contains:
- Common: AggregateRoot base and DomainEvent base
- Entities: Aggregates with identity (Todo)
- Events: Closed unions of domain events per aggregate
- Value Objects: Immutable, self-validating types (TodoTitle, UserId, TodoId)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Pydantic, dishka, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
