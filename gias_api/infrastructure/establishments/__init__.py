"""
Infrastructure adapters for the establishments bounded context.

Each adapter implements a domain port (ABC). There is no real data
source yet; establishments are served from in-memory sample records.
"""
