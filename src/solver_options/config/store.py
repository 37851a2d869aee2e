"""Typed option store -- the single source of truth for solver settings.

:class:`Options` holds every option as an :class:`OptionValue` tagged with
its shape, keyed by shape and identifier.  :func:`get_options` returns the one
process-wide instance, built on first access with every default in place.

Usage follows two phases: a single-threaded configuration phase (argument
parsing, programmatic overrides) in which all writes happen, then an
execution phase in which any number of workers only read.  The store does
no locking of its own; overlapping a write with other threads' reads is a
data race.
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from solver_options.domain.errors import (
    OptionsCopyError,
    ShapeMismatchError,
    UnknownOptionError,
)
from solver_options.domain.identifiers import DEFAULT_VALUES, OPTION_SHAPES, Shape
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

if TYPE_CHECKING:
    from solver_options.config.parser import OptionParser
    from solver_options.domain.strategies import (
        DivideStrategy,
        MILPSolverBoundTighteningType,
        SnCDivideStrategy,
    )

logger = logging.getLogger(__name__)


class Options:
    """Heterogeneous store of solver options.

    Scalar shapes (bool, int, float, string) are read and written one value
    at a time.  Structured shapes are written in bulk and follow one of two
    disciplines:

    * **replace** -- pair-tables and lists of flag tables: the update clears
      the entry and repopulates it from the supplied data.
    * **merge** -- index-flag tables and index-to-index tables: the update
      inserts or overwrites individual inner keys; other keys survive.

    Each shape has its own identifier space: writing an id through a setter
    of another shape creates a separate entry and never fails.  Reading an
    id through a shape it was never written under raises
    :class:`ShapeMismatchError` if the id exists under another shape.

    Getters for structured shapes return copies.  The store cannot be
    copied, deep-copied or pickled.
    """

    def __init__(self) -> None:
        # Keyed by (shape, id): each shape has its own identifier space.
        self._entries: dict[tuple[Shape, int], OptionValue] = {}
        self._parser: OptionParser | None = None
        self._initialize_default_values()

    def _initialize_default_values(self) -> None:
        self._entries.clear()
        for option, default in DEFAULT_VALUES.items():
            shape = OPTION_SHAPES[option]
            self._entries[(shape, _key(option))] = OptionValue(
                shape, normalise_value(shape, default),
            )
        logger.debug("Populated %d option defaults", len(self._entries))

    def reset(self) -> None:
        """Restore every default, dropping all other entries."""
        self._initialize_default_values()

    # -- duplication is not supported --------------------------------------

    def __copy__(self) -> Options:
        raise OptionsCopyError("Options cannot be copied; share the existing instance.")

    def __deepcopy__(self, memo: dict[int, Any]) -> Options:
        raise OptionsCopyError("Options cannot be copied; share the existing instance.")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise OptionsCopyError("Options cannot be pickled.")

    # -- introspection -----------------------------------------------------

    def __contains__(self, option: object) -> bool:
        try:
            return bool(self.shapes(option))  # type: ignore[arg-type]
        except TypeError:
            return False

    def shapes(self, option: int) -> frozenset[Shape]:
        """Return every shape under which *option* currently has a value."""
        key = _key(option)
        return frozenset(shape for shape in Shape if (shape, key) in self._entries)

    # -- internals ---------------------------------------------------------

    def _get(self, option: int, shape: Shape) -> Any:
        key = _key(option)
        entry = self._entries.get((shape, key))
        if entry is None:
            for stored in Shape:
                if (stored, key) in self._entries:
                    raise ShapeMismatchError(option, stored, shape)
            raise UnknownOptionError(option)
        return copy_value(shape, entry.value)

    def _set(self, option: int, shape: Shape, value: Any) -> None:
        self._entries[(shape, _key(option))] = OptionValue(
            shape, normalise_value(shape, value),
        )
        logger.debug("Set %s option %s", shape, _name(option))

    def _merge(self, option: int, shape: Shape, values: Any) -> None:
        update = normalise_value(shape, values)
        entry = self._entries.get((shape, _key(option)))
        merged = dict(entry.value) if entry is not None else {}
        merged.update(update)
        self._entries[(shape, _key(option))] = OptionValue(shape, merged)
        logger.debug(
            "Merged %d entries into %s option %s", len(update), shape, _name(option),
        )

    # -- scalar shapes -----------------------------------------------------

    def get_bool(self, option: int) -> bool:
        return self._get(option, Shape.BOOL)

    def get_int(self, option: int) -> int:
        return self._get(option, Shape.INT)

    def get_float(self, option: int) -> float:
        return self._get(option, Shape.FLOAT)

    def get_string(self, option: int) -> str:
        return self._get(option, Shape.STRING)

    def set_bool(self, option: int, value: bool) -> None:
        self._set(option, Shape.BOOL, value)

    def set_int(self, option: int, value: int) -> None:
        self._set(option, Shape.INT, value)

    def set_float(self, option: int, value: float) -> None:
        self._set(option, Shape.FLOAT, value)

    def set_string(self, option: int, value: str) -> None:
        self._set(option, Shape.STRING, value)

    # -- structured shapes -------------------------------------------------

    def get_pair_table(self, option: int) -> PairTable:
        """Return a copy of the ``index -> (low, high)`` table."""
        return self._get(option, Shape.PAIR_TABLE)

    def get_index_flags(self, option: int) -> IndexFlags:
        """Return a copy of the ``index -> flag`` table."""
        return self._get(option, Shape.INDEX_FLAGS)

    def get_index_map(self, option: int) -> IndexMap:
        """Return a copy of the ``index -> index`` table."""
        return self._get(option, Shape.INDEX_MAP)

    def get_flag_table_list(self, option: int) -> FlagTableList:
        """Return a copy of the ordered list of ``index -> flag`` tables."""
        return self._get(option, Shape.FLAG_TABLE_LIST)

    def set_pair_table(self, option: int, values: Mapping[int, BoundPair]) -> None:
        """Replace the pair-table for *option* with *values*."""
        self._set(option, Shape.PAIR_TABLE, values)

    def set_flag_table_list(
        self, option: int, values: Sequence[Mapping[int, bool]],
    ) -> None:
        """Replace the list of flag tables for *option* with *values*."""
        self._set(option, Shape.FLAG_TABLE_LIST, values)

    def set_index_flags(self, option: int, values: Mapping[int, bool]) -> None:
        """Merge *values* into the index-flag table for *option*."""
        self._merge(option, Shape.INDEX_FLAGS, values)

    def set_index_map(self, option: int, values: Mapping[int, int]) -> None:
        """Merge *values* into the index-to-index table for *option*."""
        self._merge(option, Shape.INDEX_MAP, values)

    # -- argument parsing --------------------------------------------------

    @property
    def parser(self) -> OptionParser:
        """The argument parser bound to this store, built on first use."""
        if self._parser is None:
            from solver_options.config.parser import OptionParser

            self._parser = OptionParser(self)
        return self._parser

    def parse_options(self, argv: Sequence[str] | None = None) -> None:
        """Apply command-line flags in *argv* to this store."""
        self.parser.parse(argv)

    def print_help_message(self) -> None:
        self.parser.print_help_message()

    # -- derived strategies ------------------------------------------------

    def get_divide_strategy(self) -> DivideStrategy:
        from solver_options.config.resolvers import resolve_divide_strategy

        return resolve_divide_strategy(self)

    def get_snc_divide_strategy(self) -> SnCDivideStrategy:
        from solver_options.config.resolvers import resolve_snc_divide_strategy

        return resolve_snc_divide_strategy(self)

    def get_milp_solver_bound_tightening_type(
        self, gurobi_enabled: bool,
    ) -> MILPSolverBoundTighteningType:
        from solver_options.config.resolvers import resolve_bound_tightening_type

        return resolve_bound_tightening_type(gurobi_enabled, self)


@functools.lru_cache(maxsize=1)
def get_options() -> Options:
    """Return the process-wide :class:`Options` instance.

    The instance is built on the first call, with all defaults populated,
    and every later call returns the same object.  Tests call
    ``get_options.cache_clear()`` to start over.
    """
    logger.debug("Creating process-wide option store")
    return Options()


def _name(option: int) -> str:
    return getattr(option, "name", None) or str(option)


def _key(option: Any) -> int:
    # operator.index rejects strings and floats that int() would coerce
    return operator.index(option)
