"""Strongly typed strategy enumerations derived from string options."""

from __future__ import annotations

from enum import Enum


class DivideStrategy(Enum):
    """How the search space is split at each divide-and-conquer decision."""

    POLARITY = "polarity"
    EARLIEST_RELU = "earliest-relu"
    RELU_VIOLATION = "relu-violation"
    LARGEST_INTERVAL = "largest-interval"
    AUTO = "auto"


class SnCDivideStrategy(Enum):
    """Split strategy used by parallel split-and-conquer workers."""

    POLARITY = "polarity"
    LARGEST_INTERVAL = "largest-interval"
    AUTO = "auto"


class MILPSolverBoundTighteningType(Enum):
    """Bound-tightening technique, optionally backed by an LP/MILP solver."""

    LP_RELAXATION = "lp"
    LP_RELAXATION_INCREMENTAL = "lp-inc"
    MILP_ENCODING = "milp"
    MILP_ENCODING_INCREMENTAL = "milp-inc"
    ITERATIVE_PROPAGATION = "iter-prop"
    NONE = "none"
