"""
Domain layer package.

Contains pure business logic: value objects, aggregates, domain errors
and port interfaces. This layer has ZERO external dependencies.
No framework imports, no IO, no logging.
"""
