"""Fork-aware context-local storage cells."""

from __future__ import annotations

import weakref
from contextvars import ContextVar
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()

# One variable for every cell: maps a weak reference to the cell to the cell's
# value in this context. Mappings are never mutated in place; each write
# stores a new dict so copied contexts keep their own view.
_values: ContextVar[Dict[weakref.ref, object]] = ContextVar("forkspan.context_locals", default={})


def _live(values: Dict[weakref.ref, object]) -> Dict[weakref.ref, object]:
    return {ref: value for ref, value in values.items() if ref() is not None}


def _prune(ref: weakref.ref) -> None:
    # Runs when a cell is collected; other contexts drop it on their next write.
    values = _values.get()
    if any(key is ref for key in values):
        _values.set(_live(values))


class ContextLocal(Generic[T]):
    """
    A value keyed to the current execution context.

    Each thread, asyncio task or executor work item sees its own value.
    Subclasses supply ``initial_value()`` for contexts that never set one,
    and ``derive_child_value()`` to compute a forked child's value from the
    parent's. Derivation runs once, in the parent, when the child is forked
    via ``forkspan.context.fork``; it is never consulted again afterwards.

    Values are held only through a weak reference to the cell, so dropping
    the cell releases them.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or type(self).__name__
        self._ref = weakref.ref(self, _prune)

    def initial_value(self) -> Optional[T]:
        return None

    def derive_child_value(self, parent_value: T) -> T:
        return parent_value

    def get(self) -> T:
        """Return the calling context's value, materializing the initial value on first access."""
        value = _values.get().get(self._ref, _UNSET)
        if value is _UNSET:
            value = self.initial_value()
            self.set(value)
        return value

    def set(self, value: T) -> None:
        values = _live(_values.get())
        values[self._ref] = value
        _values.set(values)

    def clear(self) -> None:
        """Drop the calling context's value; the next get() starts from the initial value."""
        values = _values.get()
        if self._ref in values:
            values = _live(values)
            values.pop(self._ref, None)
            _values.set(values)

    def is_set(self) -> bool:
        return self._ref in _values.get()

    def __repr__(self) -> str:
        value = _values.get().get(self._ref, _UNSET)
        shown = "<unset>" if value is _UNSET else repr(value)
        return f"{type(self).__name__}({self.name}={shown})"


def derive_values() -> Dict[weakref.ref, object]:
    """
    Derive a child's value for every cell holding a value in the calling context.

    Cells never touched here stay unset in the child.
    """
    derived = {}
    for ref, value in _values.get().items():
        local = ref()
        if local is not None:
            derived[ref] = local.derive_child_value(value)
    return derived


def install_values(values: Dict[weakref.ref, object]) -> None:
    """Replace every cell's value in the calling context with ``values``."""
    _values.set(values)
