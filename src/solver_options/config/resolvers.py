"""Resolve string options into strategy enumerations.

Each resolver reads one string entry and maps it through a fixed table.
Unrecognised or empty strings never raise: they fall back to a documented
variant.  Results are recomputed on every call.
"""

from __future__ import annotations

from solver_options.config.store import Options, get_options
from solver_options.domain.identifiers import OptionId
from solver_options.domain.strategies import (
    DivideStrategy,
    MILPSolverBoundTighteningType,
    SnCDivideStrategy,
)

_DIVIDE_STRATEGIES: dict[str, DivideStrategy] = {
    "polarity": DivideStrategy.POLARITY,
    "earliest-relu": DivideStrategy.EARLIEST_RELU,
    "relu-violation": DivideStrategy.RELU_VIOLATION,
    "largest-interval": DivideStrategy.LARGEST_INTERVAL,
}

_SNC_DIVIDE_STRATEGIES: dict[str, SnCDivideStrategy] = {
    "polarity": SnCDivideStrategy.POLARITY,
    "largest-interval": SnCDivideStrategy.LARGEST_INTERVAL,
}

_BOUND_TIGHTENING_TYPES: dict[str, MILPSolverBoundTighteningType] = {
    "lp": MILPSolverBoundTighteningType.LP_RELAXATION,
    "lp-inc": MILPSolverBoundTighteningType.LP_RELAXATION_INCREMENTAL,
    "milp": MILPSolverBoundTighteningType.MILP_ENCODING,
    "milp-inc": MILPSolverBoundTighteningType.MILP_ENCODING_INCREMENTAL,
    "iter-prop": MILPSolverBoundTighteningType.ITERATIVE_PROPAGATION,
    "none": MILPSolverBoundTighteningType.NONE,
}


def resolve_divide_strategy(options: Options | None = None) -> DivideStrategy:
    """Map the splitting-strategy option to a :class:`DivideStrategy`.

    Any string outside the table, including the empty default, yields
    :attr:`DivideStrategy.AUTO`.
    """
    options = options if options is not None else get_options()
    text = options.get_string(OptionId.SPLITTING_STRATEGY)
    return _DIVIDE_STRATEGIES.get(text, DivideStrategy.AUTO)


def resolve_snc_divide_strategy(options: Options | None = None) -> SnCDivideStrategy:
    """Map the parallel splitting-strategy option to a :class:`SnCDivideStrategy`.

    Falls back to :attr:`SnCDivideStrategy.AUTO`.
    """
    options = options if options is not None else get_options()
    text = options.get_string(OptionId.SNC_SPLITTING_STRATEGY)
    return _SNC_DIVIDE_STRATEGIES.get(text, SnCDivideStrategy.AUTO)


def resolve_bound_tightening_type(
    gurobi_enabled: bool,
    options: Options | None = None,
) -> MILPSolverBoundTighteningType:
    """Map the bound-tightening option to a :class:`MILPSolverBoundTighteningType`.

    Parameters
    ----------
    gurobi_enabled:
        Whether the LP/MILP backend is available.  When False the result is
        always :attr:`MILPSolverBoundTighteningType.NONE` and the stored
        string is not read.
    options:
        Store to read from; the process-wide store when None.

    Returns
    -------
    MILPSolverBoundTighteningType
        The mapped variant, or ``LP_RELAXATION`` for an unrecognised or
        empty string.
    """
    if not gurobi_enabled:
        return MILPSolverBoundTighteningType.NONE
    options = options if options is not None else get_options()
    text = options.get_string(OptionId.MILP_SOLVER_BOUND_TIGHTENING_TYPE)
    return _BOUND_TIGHTENING_TYPES.get(text, MILPSolverBoundTighteningType.LP_RELAXATION)
