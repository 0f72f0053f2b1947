"""
Building blocks shared by every bounded context in the domain layer.

Value objects are plain frozen dataclasses: field-wise equality in
declared order comes for free. Aggregates derive from AggregateRoot.
"""

from gias_api.domain.common.aggregate_root import AggregateRoot

__all__ = ["AggregateRoot"]
