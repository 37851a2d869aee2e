"""Value models for the option registry.

Each stored entry is an :class:`OptionValue`, a frozen ``(shape, value)``
pair.  Raw values coming from callers are checked and converted to plain
Python containers by :func:`normalise_value` before they are tagged, so the
store never aliases a caller's dict or list and never holds numpy scalars.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

import numpy as np

from solver_options.domain.errors import InvalidOptionValueError
from solver_options.domain.identifiers import Shape

# Bound pair stored in a pair-table: (low, high).
BoundPair = tuple[int, int]
PairTable = dict[int, BoundPair]
IndexFlags = dict[int, bool]
IndexMap = dict[int, int]
FlagTableList = list[IndexFlags]


# ---------------------------------------------------------------------------
# Tagged value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OptionValue:
    """A stored option value tagged with its shape."""

    shape: Shape
    value: Any


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------

def _as_bool(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    raise InvalidOptionValueError(f"Expected a bool, got {type(value).__name__}.")


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidOptionValueError("Expected an int, got bool.")
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise InvalidOptionValueError(f"Expected an int, got {type(value).__name__}.")


def _as_index(value: Any) -> int:
    # Variable indices and bounds are unsigned
    index = _as_int(value)
    if index < 0:
        raise InvalidOptionValueError(f"Expected a non-negative int, got {index}.")
    return index


def _as_float(value: Any) -> float:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidOptionValueError("Expected a float, got bool.")
    if isinstance(value, (Real, np.integer, np.floating)):
        return float(value)
    raise InvalidOptionValueError(f"Expected a float, got {type(value).__name__}.")


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return str(value)
    raise InvalidOptionValueError(f"Expected a str, got {type(value).__name__}.")


# ---------------------------------------------------------------------------
# Structured coercion
# ---------------------------------------------------------------------------

def _as_pair(value: Any) -> BoundPair:
    items = value.ravel().tolist() if isinstance(value, np.ndarray) else value
    try:
        low, high = items
    except (TypeError, ValueError):
        raise InvalidOptionValueError(
            f"Expected a (low, high) pair, got {value!r}."
        ) from None
    return (_as_index(low), _as_index(high))


def _as_mapping(
    value: Any, convert: Callable[[Any], Any], label: str,
) -> dict[int, Any]:
    if not isinstance(value, Mapping):
        raise InvalidOptionValueError(
            f"Expected a mapping for {label}, got {type(value).__name__}."
        )
    return {_as_index(key): convert(item) for key, item in value.items()}


def _as_flag_tables(value: Any) -> FlagTableList:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise InvalidOptionValueError(
            f"Expected a sequence of flag tables, got {type(value).__name__}."
        )
    return [_as_mapping(table, _as_bool, Shape.INDEX_FLAGS.value) for table in value]


_NORMALISERS: dict[Shape, Callable[[Any], Any]] = {
    Shape.BOOL: _as_bool,
    Shape.INT: _as_int,
    Shape.FLOAT: _as_float,
    Shape.STRING: _as_str,
    Shape.PAIR_TABLE: lambda v: _as_mapping(v, _as_pair, Shape.PAIR_TABLE.value),
    Shape.INDEX_FLAGS: lambda v: _as_mapping(v, _as_bool, Shape.INDEX_FLAGS.value),
    Shape.INDEX_MAP: lambda v: _as_mapping(v, _as_index, Shape.INDEX_MAP.value),
    Shape.FLAG_TABLE_LIST: _as_flag_tables,
}


def normalise_value(shape: Shape, value: Any) -> Any:
    """Validate *value* against *shape* and return a plain-Python copy.

    Numpy scalars and arrays are accepted wherever the matching Python
    type is; bools are never accepted as numbers.  Inner indices, bound
    pairs and index-map targets must be non-negative.

    Parameters
    ----------
    shape:
        Target shape.
    value:
        Raw value supplied by the caller.

    Returns
    -------
    Any
        A freshly built value owned by the caller of this function.

    Raises
    ------
    InvalidOptionValueError
        If *value* does not fit *shape*.
    """
    return _NORMALISERS[shape](value)


def copy_value(shape: Shape, value: Any) -> Any:
    """Return a copy of a stored value that shares no containers with it."""
    if shape is Shape.FLAG_TABLE_LIST:
        return [dict(table) for table in value]
    if shape.is_structured:
        return dict(value)
    return value
