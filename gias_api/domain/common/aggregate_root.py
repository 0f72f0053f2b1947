"""
Generic aggregate root.

An aggregate root is identified by a single identity value. Two roots
are equal when they are of the same concrete type and share an identity,
regardless of their other attributes.
"""

from typing import Generic, TypeVar

IdT = TypeVar("IdT")


class AggregateRoot(Generic[IdT]):
    """Identity of type ``IdT`` plus equality-by-identity.

    Subclasses expose the identity through the read-only ``identifier``
    attribute and must not rebind it after construction.
    """

    identifier: IdT

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash((type(self), self.identifier))
