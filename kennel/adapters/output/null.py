"""Null output adapter.

Implements OutputPort by discarding every line.
"""

import logging

from kennel.core.ports import OutputPort

logger = logging.getLogger(__name__)


class NullOutputAdapter(OutputPort):
    """Swallows lines, keeping only a count of how many were written."""

    def __init__(self) -> None:
        self.lines_discarded = 0

    def write_line(self, text: str) -> None:
        self.lines_discarded += 1
        logger.debug(f"Discarded line #{self.lines_discarded}")
