"""
Get Information About Schools prototyping API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - establishments: URN identifiers, establishment details, the
      Establishment aggregate.

Layers:
    - domain: Pure business logic, value objects, aggregates, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
