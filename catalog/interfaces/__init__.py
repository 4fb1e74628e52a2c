"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas,
and request-scoped context loading. No business logic belongs here.
Routes read loaded entities from the context and render responses.
"""
