"""Fake implementations of core ports for testing.

- FakeOutputPort: Captured output lines for assertion
"""

from .output import FakeOutputPort

__all__ = [
    "FakeOutputPort",
]
