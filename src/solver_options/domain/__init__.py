"""Domain layer -- identifiers, shapes, values, strategies, and errors.

Re-exports all public domain types for convenient access::

    from solver_options.domain import OptionId, Shape, DivideStrategy
"""

from __future__ import annotations

from solver_options.domain.errors import (
    InvalidOptionValueError,
    OptionError,
    OptionsCopyError,
    ShapeMismatchError,
    UnknownOptionError,
)
from solver_options.domain.identifiers import (
    DEFAULT_EPSILON_FOR_COMPARISONS,
    DEFAULT_VALUES,
    OPTION_SHAPES,
    OptionId,
    Shape,
    shape_of,
)
from solver_options.domain.models import (
    BoundPair,
    FlagTableList,
    IndexFlags,
    IndexMap,
    OptionValue,
    PairTable,
    copy_value,
    normalise_value,
)
from solver_options.domain.protocols import CapabilityProbe, OptionParserProtocol
from solver_options.domain.strategies import (
    DivideStrategy,
    MILPSolverBoundTighteningType,
    SnCDivideStrategy,
)

__all__ = [
    # Identifiers
    "DEFAULT_EPSILON_FOR_COMPARISONS",
    "DEFAULT_VALUES",
    "OPTION_SHAPES",
    "OptionId",
    "Shape",
    "shape_of",
    # Models
    "BoundPair",
    "FlagTableList",
    "IndexFlags",
    "IndexMap",
    "OptionValue",
    "PairTable",
    "copy_value",
    "normalise_value",
    # Strategies
    "DivideStrategy",
    "MILPSolverBoundTighteningType",
    "SnCDivideStrategy",
    # Errors
    "InvalidOptionValueError",
    "OptionError",
    "OptionsCopyError",
    "ShapeMismatchError",
    "UnknownOptionError",
    # Protocols
    "CapabilityProbe",
    "OptionParserProtocol",
]
