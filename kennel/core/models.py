"""Domain models for Kennel.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field

from .ports import OutputPort


@dataclass
class Dog:
    """A single named dog.

    The name starts out empty and holds whatever was last assigned,
    untouched. Reading the name through get_name() also echoes it as
    one line to the injected output sink; reading the ``name`` attribute
    directly has no side effects.

    Not safe for concurrent writers; callers sharing one instance across
    threads must synchronize externally.
    """

    name: str = ""
    output: OutputPort | None = field(
        default=None, repr=False, compare=False, kw_only=True
    )

    def set_name(self, value: str) -> None:
        """Replace the dog's name with value, exactly as given."""
        self.name = value

    def get_name(self) -> str:
        """Return the dog's name, echoing it to the output sink if one is set."""
        if self.output is not None:
            self.output.write_line(self.name)
        return self.name
