"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

import pytest

from kennel.core.ports import OutputPort
from kennel.tests.fakes import FakeOutputPort


class TestOutputPort:
    """Tests for the OutputPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        """OutputPort itself cannot be instantiated."""
        with pytest.raises(TypeError):
            OutputPort()  # type: ignore[abstract]

    def test_incomplete_implementation_rejected(self) -> None:
        """A subclass missing write_line cannot be instantiated."""

        class IncompleteOutput(OutputPort):
            pass

        with pytest.raises(TypeError):
            IncompleteOutput()  # type: ignore[abstract]

    def test_fake_satisfies_contract(self) -> None:
        """The fake is a complete OutputPort."""
        port = FakeOutputPort()
        assert isinstance(port, OutputPort)
        port.write_line("Lassie")
        assert port.get_last_line() == "Lassie"

    def test_fake_reset_clears_state(self) -> None:
        """reset() returns the fake to its initial state."""
        port = FakeOutputPort()
        port.write_line("Lassie")
        port.set_should_fail(True)
        port.reset()
        assert port.lines == []
        assert port.write_call_count == 0
        assert port.get_last_line() is None
        port.write_line("Rex")
        assert port.lines == ["Rex"]
