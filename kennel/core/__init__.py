"""Core domain logic for Kennel.

This package contains zero external dependencies. The output sink a dog
echoes its name to is declared as a port here and implemented in the
adapters package.
"""

from .models import Dog
from .ports import OutputPort

__all__ = [
    "Dog",
    "OutputPort",
]
