"""Process-wide option registry for the solver engine.

Holds runtime-tunable solver parameters (worker counts, timeouts, split
strategies, numeric tolerances, bound-propagation tables) in one typed store
and resolves strategy names into enumerations.
"""

from __future__ import annotations

__version__ = "0.1.0"
