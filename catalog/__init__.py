"""
Catalog: product catalog HTTP API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - catalog: Product lookup, listing, and rendering.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports (in-memory store).
    - interfaces: FastAPI routers, response schemas, context loading.
    - shared: Cross-cutting concerns (context, rendering, errors, middleware, logging).
"""
