"""
Application layer for the establishments bounded context.

Use cases coordinate domain value objects, aggregates and ports to fulfill
read-only queries. No framework or infrastructure imports allowed.
"""
