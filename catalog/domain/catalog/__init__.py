"""
Catalog bounded context: domain layer.

Products are fixture data: created at startup, never mutated.
"""
