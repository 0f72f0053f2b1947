"""HTTP interface for the establishments bounded context."""
