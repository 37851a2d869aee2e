"""Protocol interfaces for collaborators of the option registry.

Using :class:`typing.Protocol` enables structural subtyping -- implementations
do not need to explicitly inherit from these classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class OptionParserProtocol(Protocol):
    """Translate process arguments into writes on an option store.

    Implementations must only write identifiers with the shape the catalog
    assigns them, and must finish before any solver worker starts reading.
    """

    def parse(self, argv: Sequence[str] | None = None) -> None:
        """Parse *argv* (``sys.argv[1:]`` when None) into the bound store.

        Parameters
        ----------
        argv:
            Argument list, without the program name.
        """
        ...

    def format_help(self) -> str:
        """Return the help text describing every recognised flag."""
        ...

    def print_help_message(self) -> None:
        """Write the help text to standard output."""
        ...


@runtime_checkable
class CapabilityProbe(Protocol):
    """Callable reporting whether an optional backend is available."""

    def __call__(self) -> bool:
        ...
