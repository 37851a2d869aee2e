"""Environment detection utilities.

Reports which optional solving backends are installed in the running
interpreter.
"""

from __future__ import annotations

import functools
import importlib.util
import logging

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def gurobi_enabled() -> bool:
    """Detect whether the Gurobi LP/MILP backend is available.

    Only checks that the ``gurobipy`` module can be found; the module is not
    imported and no licence check is made.

    Returns
    -------
    bool
        True when ``gurobipy`` is importable.
    """
    # find_spec raises ValueError for a loaded module without __spec__
    try:
        available = importlib.util.find_spec("gurobipy") is not None
    except (ImportError, ValueError):
        available = False
    logger.debug("Gurobi backend %s", "available" if available else "not available")
    return available
