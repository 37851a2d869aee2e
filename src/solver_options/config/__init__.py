"""Configuration sub-package.

Provides the typed option store, the process-wide accessor, strategy
resolution, backend detection, and the command-line front end.

Quick usage::

    from solver_options.config import get_options, resolve_divide_strategy
    from solver_options.domain import OptionId

    options = get_options()
    options.set_string(OptionId.SPLITTING_STRATEGY, "polarity")
    print(resolve_divide_strategy(options))
"""

from __future__ import annotations

from solver_options.config.environment import gurobi_enabled
from solver_options.config.parser import OptionParser
from solver_options.config.resolvers import (
    resolve_bound_tightening_type,
    resolve_divide_strategy,
    resolve_snc_divide_strategy,
)
from solver_options.config.store import Options, get_options

__all__ = [
    "OptionParser",
    "Options",
    "get_options",
    "gurobi_enabled",
    "resolve_bound_tightening_type",
    "resolve_divide_strategy",
    "resolve_snc_divide_strategy",
]
