"""Command-line front end for the option store.

:class:`OptionParser` declares one flag per user-facing option and writes
the flags actually present on the command line into its bound
:class:`~solver_options.config.store.Options`.  Flags that are absent leave
the stored value untouched, so defaults and earlier programmatic overrides
survive parsing.

Strategy names are passed through verbatim; unrecognised names are
resolved to fallback variants later, never rejected here.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from solver_options.domain.identifiers import OptionId, Shape, shape_of

if TYPE_CHECKING:
    from solver_options.config.store import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Flag:
    """One command-line flag bound to an option identifier."""

    flags: tuple[str, ...]
    option: OptionId
    help: str
    metavar: str | None = None


_FLAGS: tuple[_Flag, ...] = (
    # Files
    _Flag(("input",), OptionId.INPUT_FILE_PATH, "Neural network file."),
    _Flag(("property",), OptionId.PROPERTY_FILE_PATH, "Property file."),
    _Flag(("--input-query",), OptionId.INPUT_QUERY_FILE_PATH,
          "Serialized input query file.", "PATH"),
    _Flag(("--summary-file",), OptionId.SUMMARY_FILE,
          "Write a one-line run summary to this file.", "PATH"),
    _Flag(("--query-dump-file",), OptionId.QUERY_DUMP_FILE,
          "Dump the preprocessed query to this file and exit.", "PATH"),
    # Switches
    _Flag(("--dnc",), OptionId.DNC_MODE, "Use divide-and-conquer solving mode."),
    _Flag(("--restore-tree-states",), OptionId.RESTORE_TREE_STATES,
          "Restore tree states in divide-and-conquer mode."),
    _Flag(("--iterative-propagation",), OptionId.ITERATIVE_PROPAGATION,
          "Propagate bounds iteratively before solving."),
    _Flag(("--solve-with-milp",), OptionId.SOLVE_WITH_MILP,
          "Encode the whole query as a MILP and solve it directly."),
    _Flag(("--add-aux-equations",),
          OptionId.PREPROCESSOR_PL_CONSTRAINTS_ADD_AUX_EQUATIONS,
          "Add auxiliary equations for piecewise-linear constraints."),
    # Integers
    _Flag(("--num-workers",), OptionId.NUM_WORKERS,
          "Number of worker threads (default: 1).", "N"),
    _Flag(("--initial-divides",), OptionId.NUM_INITIAL_DIVIDES,
          "Number of times to split the query up front (default: 0).", "N"),
    _Flag(("--num-online-divides",), OptionId.NUM_ONLINE_DIVIDES,
          "Number of splits when a sub-query times out (default: 2).", "N"),
    _Flag(("--initial-timeout",), OptionId.INITIAL_TIMEOUT,
          "Seconds before the first sub-query times out (default: 5).", "SECONDS"),
    _Flag(("--verbosity",), OptionId.VERBOSITY,
          "Verbosity level, 0 is silent (default: 2).", "LEVEL"),
    _Flag(("--timeout",), OptionId.TIMEOUT,
          "Global timeout in seconds, 0 means none (default: 0).", "SECONDS"),
    _Flag(("--constraint-violation-threshold",),
          OptionId.CONSTRAINT_VIOLATION_THRESHOLD,
          "Violations before a constraint is split on (default: 20).", "N"),
    # Floats
    _Flag(("--timeout-factor",), OptionId.TIMEOUT_FACTOR,
          "Timeout multiplier for divided sub-queries (default: 1.5).", "FACTOR"),
    _Flag(("--milp-timeout",), OptionId.MILP_SOLVER_TIMEOUT,
          "Per-call timeout for the MILP backend in seconds (default: 1.0).",
          "SECONDS"),
    _Flag(("--preprocessor-bound-tolerance",),
          OptionId.PREPROCESSOR_BOUND_TOLERANCE,
          "Tolerance for bound comparisons in the preprocessor.", "EPS"),
    # Strategies
    _Flag(("--split-strategy",), OptionId.SPLITTING_STRATEGY,
          "polarity, earliest-relu, relu-violation, largest-interval or auto.",
          "STRATEGY"),
    _Flag(("--snc-split-strategy",), OptionId.SNC_SPLITTING_STRATEGY,
          "polarity, largest-interval or auto.", "STRATEGY"),
    _Flag(("--milp-tightening",), OptionId.MILP_SOLVER_BOUND_TIGHTENING_TYPE,
          "lp, lp-inc, milp, milp-inc, iter-prop or none.", "TYPE"),
)

_ARG_TYPES: dict[Shape, type] = {Shape.INT: int, Shape.FLOAT: float, Shape.STRING: str}


def _dest(flag: _Flag) -> str:
    return flag.option.name.lower()


class OptionParser:
    """Parse process arguments into an option store.

    Parameters
    ----------
    options:
        The store that parsed values are written to.
    """

    def __init__(self, options: Options) -> None:
        self._options = options

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the command-line argument parser.

        Every argument uses ``argparse.SUPPRESS`` as its default so that
        only flags given on the command line reach the namespace.

        Returns
        -------
        argparse.ArgumentParser
            Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="solver_options",
            description="Configure and inspect solver options.",
            argument_default=argparse.SUPPRESS,
        )
        for flag in _FLAGS:
            shape = shape_of(flag.option)
            kwargs: dict[str, Any] = {"help": flag.help}
            if not flag.flags[0].startswith("-"):
                kwargs["nargs"] = "?"
                kwargs["metavar"] = flag.flags[0]
                parser.add_argument(_dest(flag), **kwargs)
                continue
            kwargs["dest"] = _dest(flag)
            if shape is Shape.BOOL:
                kwargs["action"] = "store_true"
            else:
                kwargs["type"] = _ARG_TYPES[shape]
                kwargs["metavar"] = flag.metavar
            parser.add_argument(*flag.flags, **kwargs)
        return parser

    def apply(self, namespace: argparse.Namespace) -> None:
        """Write every recognised flag present in *namespace* to the store."""
        values = vars(namespace)
        for flag in _FLAGS:
            dest = _dest(flag)
            if dest not in values or values[dest] is None:
                continue
            value = values[dest]
            shape = shape_of(flag.option)
            if shape is Shape.BOOL:
                self._options.set_bool(flag.option, value)
            elif shape is Shape.INT:
                self._options.set_int(flag.option, value)
            elif shape is Shape.FLOAT:
                self._options.set_float(flag.option, value)
            else:
                self._options.set_string(flag.option, value)
            logger.debug("Option %s set from command line", flag.option.name)

    def parse(self, argv: Sequence[str] | None = None) -> None:
        """Parse *argv* (``sys.argv[1:]`` when None) into the bound store."""
        self.apply(self.build_parser().parse_args(argv))

    def format_help(self) -> str:
        return self.build_parser().format_help()

    def print_help_message(self) -> None:
        self.build_parser().print_help()
