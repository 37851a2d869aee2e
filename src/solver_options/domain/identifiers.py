"""Option identifier catalog.

Each :class:`OptionId` names one configurable parameter of the solver and
belongs to exactly one :class:`Shape`.  Identifier values are unique across
shapes, so a catalogued id names one option whichever shape it is read
as.  The catalog, together with :data:`DEFAULT_VALUES`, is a stable contract
consumed by every solver subsystem.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

from solver_options.domain.errors import UnknownOptionError

# Global tolerance for floating-point comparisons in the solver.
DEFAULT_EPSILON_FOR_COMPARISONS = 1e-10


class Shape(Enum):
    """The fixed set of value shapes the store can hold."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    PAIR_TABLE = "pair-table"
    INDEX_FLAGS = "index-flags"
    INDEX_MAP = "index-map"
    FLAG_TABLE_LIST = "flag-table-list"

    @property
    def is_structured(self) -> bool:
        """True for the container shapes, False for the scalar ones."""
        return self not in _SCALAR_SHAPES

    def __str__(self) -> str:
        return self.value


_SCALAR_SHAPES = frozenset({Shape.BOOL, Shape.INT, Shape.FLOAT, Shape.STRING})


class OptionId(IntEnum):
    """Identifiers of every solver option."""

    # Bool options
    DNC_MODE = 0
    PREPROCESSOR_PL_CONSTRAINTS_ADD_AUX_EQUATIONS = 1
    RESTORE_TREE_STATES = 2
    ITERATIVE_PROPAGATION = 3
    SOLVE_WITH_MILP = 4

    # Int options
    NUM_WORKERS = 100
    NUM_INITIAL_DIVIDES = 101
    NUM_ONLINE_DIVIDES = 102
    INITIAL_TIMEOUT = 103
    VERBOSITY = 104
    TIMEOUT = 105
    CONSTRAINT_VIOLATION_THRESHOLD = 106

    # Float options
    TIMEOUT_FACTOR = 200
    MILP_SOLVER_TIMEOUT = 201
    PREPROCESSOR_BOUND_TOLERANCE = 202

    # String options
    INPUT_FILE_PATH = 300
    PROPERTY_FILE_PATH = 301
    INPUT_QUERY_FILE_PATH = 302
    SUMMARY_FILE = 303
    SPLITTING_STRATEGY = 304
    SNC_SPLITTING_STRATEGY = 305
    QUERY_DUMP_FILE = 306
    MILP_SOLVER_BOUND_TIGHTENING_TYPE = 307

    # Structured options
    GAMMA_ABSTRACT = 400
    VAR_INDEX_TO_POS = 401
    VAR_INDEX_TO_INC = 402
    POST_VAR_INDICES = 403
    GAMMA = 404


# ---------------------------------------------------------------------------
# Shape catalog
# ---------------------------------------------------------------------------

OPTION_SHAPES: Mapping[OptionId, Shape] = MappingProxyType({
    OptionId.DNC_MODE: Shape.BOOL,
    OptionId.PREPROCESSOR_PL_CONSTRAINTS_ADD_AUX_EQUATIONS: Shape.BOOL,
    OptionId.RESTORE_TREE_STATES: Shape.BOOL,
    OptionId.ITERATIVE_PROPAGATION: Shape.BOOL,
    OptionId.SOLVE_WITH_MILP: Shape.BOOL,
    OptionId.NUM_WORKERS: Shape.INT,
    OptionId.NUM_INITIAL_DIVIDES: Shape.INT,
    OptionId.NUM_ONLINE_DIVIDES: Shape.INT,
    OptionId.INITIAL_TIMEOUT: Shape.INT,
    OptionId.VERBOSITY: Shape.INT,
    OptionId.TIMEOUT: Shape.INT,
    OptionId.CONSTRAINT_VIOLATION_THRESHOLD: Shape.INT,
    OptionId.TIMEOUT_FACTOR: Shape.FLOAT,
    OptionId.MILP_SOLVER_TIMEOUT: Shape.FLOAT,
    OptionId.PREPROCESSOR_BOUND_TOLERANCE: Shape.FLOAT,
    OptionId.INPUT_FILE_PATH: Shape.STRING,
    OptionId.PROPERTY_FILE_PATH: Shape.STRING,
    OptionId.INPUT_QUERY_FILE_PATH: Shape.STRING,
    OptionId.SUMMARY_FILE: Shape.STRING,
    OptionId.SPLITTING_STRATEGY: Shape.STRING,
    OptionId.SNC_SPLITTING_STRATEGY: Shape.STRING,
    OptionId.QUERY_DUMP_FILE: Shape.STRING,
    OptionId.MILP_SOLVER_BOUND_TIGHTENING_TYPE: Shape.STRING,
    OptionId.GAMMA_ABSTRACT: Shape.PAIR_TABLE,
    OptionId.VAR_INDEX_TO_POS: Shape.INDEX_FLAGS,
    OptionId.VAR_INDEX_TO_INC: Shape.INDEX_FLAGS,
    OptionId.POST_VAR_INDICES: Shape.INDEX_MAP,
    OptionId.GAMMA: Shape.FLAG_TABLE_LIST,
})


def shape_of(option: int) -> Shape:
    """Return the catalogued shape of *option*.

    Raises
    ------
    UnknownOptionError
        If *option* is not part of the catalog.
    """
    try:
        return OPTION_SHAPES[OptionId(option)]
    except (ValueError, KeyError):
        raise UnknownOptionError(option) from None


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Structured defaults are empty containers; the store builds fresh ones.
DEFAULT_VALUES: Mapping[OptionId, Any] = MappingProxyType({
    OptionId.DNC_MODE: False,
    OptionId.PREPROCESSOR_PL_CONSTRAINTS_ADD_AUX_EQUATIONS: False,
    OptionId.RESTORE_TREE_STATES: False,
    OptionId.ITERATIVE_PROPAGATION: False,
    OptionId.SOLVE_WITH_MILP: False,

    OptionId.NUM_WORKERS: 1,
    OptionId.NUM_INITIAL_DIVIDES: 0,
    OptionId.NUM_ONLINE_DIVIDES: 2,
    OptionId.INITIAL_TIMEOUT: 5,
    OptionId.VERBOSITY: 2,
    OptionId.TIMEOUT: 0,
    OptionId.CONSTRAINT_VIOLATION_THRESHOLD: 20,

    OptionId.TIMEOUT_FACTOR: 1.5,
    OptionId.MILP_SOLVER_TIMEOUT: 1.0,
    OptionId.PREPROCESSOR_BOUND_TOLERANCE: DEFAULT_EPSILON_FOR_COMPARISONS,

    OptionId.INPUT_FILE_PATH: "",
    OptionId.PROPERTY_FILE_PATH: "",
    OptionId.INPUT_QUERY_FILE_PATH: "",
    OptionId.SUMMARY_FILE: "",
    OptionId.SPLITTING_STRATEGY: "",
    OptionId.SNC_SPLITTING_STRATEGY: "",
    OptionId.QUERY_DUMP_FILE: "",
    OptionId.MILP_SOLVER_BOUND_TIGHTENING_TYPE: "",

    OptionId.GAMMA_ABSTRACT: {},
    OptionId.VAR_INDEX_TO_POS: {},
    OptionId.VAR_INDEX_TO_INC: {},
    OptionId.POST_VAR_INDICES: {},
    OptionId.GAMMA: [],
})
