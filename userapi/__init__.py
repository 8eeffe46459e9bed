"""
User API — minimal HTTP service for user lookups.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Health check, user listing and lookup by id.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
