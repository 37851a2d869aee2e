"""Exception hierarchy for the option registry.

Every error raised here signals a defect in calling code (a misused
identifier, a value of the wrong shape, an attempt to duplicate the store).
None of them are caught inside the package.
"""

from __future__ import annotations


class OptionError(Exception):
    """Base class for all option registry errors."""


class UnknownOptionError(OptionError, KeyError):
    """Raised when an identifier has neither a default nor a stored value."""

    def __init__(self, option: int) -> None:
        self.option = option
        super().__init__(f"No value stored for option {_describe(option)}.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ShapeMismatchError(OptionError, TypeError):
    """Raised when an entry is accessed through an accessor of another shape."""

    def __init__(self, option: int, stored: object, requested: object) -> None:
        self.option = option
        self.stored = stored
        self.requested = requested
        super().__init__(
            f"Option {_describe(option)} is stored as {stored}, "
            f"not {requested}."
        )


class InvalidOptionValueError(OptionError, TypeError):
    """Raised when a value does not fit the shape it is stored under."""


class OptionsCopyError(OptionError, TypeError):
    """Raised on any attempt to copy, deep-copy or pickle the store."""


def _describe(option: int) -> str:
    name = getattr(option, "name", None)
    return f"{name} ({int(option)})" if name else str(option)
