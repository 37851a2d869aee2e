"""Entry point for inspecting solver option resolution.

Parse solver flags into the process-wide store and print the resolved
strategies::

    python -m solver_options network.nnet property.txt --split-strategy polarity
    python -m solver_options --milp-tightening milp-inc --debug
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from solver_options.config.environment import gurobi_enabled
from solver_options.config.parser import OptionParser
from solver_options.config.store import Options, get_options
from solver_options.domain.identifiers import OptionId
from solver_options.domain.protocols import CapabilityProbe

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool, verbosity: int) -> None:
    """Set up root logger.

    Parameters
    ----------
    debug:
        If True, set log level to DEBUG.
    verbosity:
        Stored verbosity option; 0 keeps only warnings, anything else INFO.
    """
    if debug:
        level = logging.DEBUG
    elif verbosity <= 0:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def summarize(options: Options, backend_available: bool) -> str:
    """Return a human-readable summary of the resolved strategies."""
    lines = [
        f"workers:          {options.get_int(OptionId.NUM_WORKERS)}",
        f"dnc mode:         {options.get_bool(OptionId.DNC_MODE)}",
        f"split strategy:   {options.get_divide_strategy().name}",
        f"snc strategy:     {options.get_snc_divide_strategy().name}",
        "bound tightening: "
        + options.get_milp_solver_bound_tightening_type(backend_available).name,
        f"gurobi available: {backend_available}",
    ]
    return "\n".join(lines)


def main(
    argv: Sequence[str] | None = None,
    probe: CapabilityProbe = gurobi_enabled,
) -> int:
    """Parse arguments into the process-wide store and print a summary."""
    options = get_options()
    option_parser = OptionParser(options)
    parser = option_parser.build_parser()
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)
    option_parser.apply(args)
    _configure_logging(args.debug, options.get_int(OptionId.VERBOSITY))

    backend_available = probe()
    logger.info("Options parsed; gurobi backend available: %s", backend_available)
    print(summarize(options, backend_available))
    return 0


if __name__ == "__main__":
    sys.exit(main())
