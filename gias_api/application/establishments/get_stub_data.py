"""
Use case: Produce placeholder stub data.

Input: None
Output: list[dict] of empty placeholder objects
Side effects: None.
Failure cases: None.
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_STUB_ITEM_COUNT = 5


class GetStubDataUseCase:
    """Returns a fixed number of empty objects for prototype consumers."""

    def __init__(self, item_count: int = DEFAULT_STUB_ITEM_COUNT) -> None:
        self._item_count = item_count

    def execute(self) -> list[dict]:
        """Return ``item_count`` empty placeholder objects."""
        logger.info("Returning %d stub items", self._item_count)
        return [{} for _ in range(self._item_count)]
