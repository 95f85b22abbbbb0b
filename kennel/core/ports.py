"""Port interfaces for Kennel.

These abstract base classes define the boundary between the core
domain model and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - OutputPort: Line-oriented text sink a dog echoes its name to
"""

from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port for writing single lines of text to an output sink.

    Adapters implementing this port decide where the text ends up
    (terminal, buffer, nowhere). The core never touches sys.stdout
    directly.
    """

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write text as one line.

        Args:
            text: The bare text to write. The adapter adds the line
                terminator; no prefix or formatting is applied.

        Raises:
            Exception: If the underlying sink cannot be written to.
                The error propagates to the caller unchanged.
        """
