"""Output adapters for echoing a dog's name.

Implementations support these channels:
- Stdout (terminal, or any text stream handed in)
- Null (discard everything)
"""

from .null import NullOutputAdapter
from .stdout import StdoutOutputAdapter

__all__ = [
    "NullOutputAdapter",
    "StdoutOutputAdapter",
]
