"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Request-scoped context
- Response rendering and emission
- Error payloads and handlers
- HTTP middleware and rate limiting
- Logging configuration
"""
