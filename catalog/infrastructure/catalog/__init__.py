"""
Infrastructure adapters for the catalog bounded context.

Each adapter implements a domain port (ABC).
"""
