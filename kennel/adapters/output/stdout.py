"""Stdout output adapter.

Implements OutputPort by printing each line to the terminal.
"""

import logging
import sys
from typing import TextIO

from kennel.core.ports import OutputPort

logger = logging.getLogger(__name__)


class StdoutOutputAdapter(OutputPort):
    """Prints lines to stdout, or to an explicitly given text stream."""

    def __init__(self, stream: TextIO | None = None):
        """Initialize stdout output adapter.

        Args:
            stream: Text stream to write to. If None, sys.stdout is looked
                up on every write so that redirection and capture apply.
        """
        self.stream = stream

    def write_line(self, text: str) -> None:
        """Print text followed by a newline."""
        target = self.stream if self.stream is not None else sys.stdout
        print(text, file=target)
        logger.debug(f"Wrote {len(text)} characters to {self._describe(target)}")

    @staticmethod
    def _describe(target: TextIO) -> str:
        """Name the stream for log messages."""
        return getattr(target, "name", type(target).__name__)
