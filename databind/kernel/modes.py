"""
databind Kernel — Mode Classification

The mode is never stored on the state. It is read off the state's shape:

  init               nothing loaded, nothing selected, nothing bound
  dataset_selection  props and datasets loaded, no dataset selected, nothing bound
  binding_selection  props and datasets loaded, a dataset selected, bindings free

Predicates are evaluated in that fixed order and the first match wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from databind.kernel.errors import InvalidStateError
from databind.kernel.types import AppMode, Mode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_empty(value: Any) -> bool:
    return len(value) == 0


def _is_loaded(state: Any) -> bool:
    return (
        not _is_empty(state.component_properties)
        and not _is_empty(state.available_datasets)
        and not _is_empty(state.dataset_fields)
    )


def is_init(state: Any) -> bool:
    return (
        _is_empty(state.component_properties)
        and _is_empty(state.available_datasets)
        and _is_empty(state.dataset_fields)
        and state.selected_dataset is None
        and _is_empty(state.bindings)
    )


def is_dataset_selection(state: Any) -> bool:
    return _is_loaded(state) and state.selected_dataset is None and _is_empty(state.bindings)


def is_binding_selection(state: Any) -> bool:
    return _is_loaded(state) and state.selected_dataset is not None


_PREDICATES: tuple[tuple[Mode, Callable[[Any], bool]], ...] = (
    (Mode.INIT, is_init),
    (Mode.DATASET_SELECTION, is_dataset_selection),
    (Mode.BINDING_SELECTION, is_binding_selection),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def matching_modes(state: Any) -> list[Mode]:
    """
    Every mode whose predicate holds for state, in classification order.
    A predicate that raises counts as not matching.
    """
    return [mode for mode, predicate in _PREDICATES if _probe(predicate, state)]


def mode_of(state: Any) -> AppMode:
    """
    Classify state. Returns the first matching mode paired with the state.
    Raises InvalidStateError if no mode matches.
    """
    for mode, predicate in _PREDICATES:
        if _probe(predicate, state):
            return AppMode(mode=mode, state=state)

    raise InvalidStateError(f"INVALID_STATE: state matches no application mode: {state!r}")


def _probe(predicate: Callable[[Any], bool], state: Any) -> bool:
    try:
        return bool(predicate(state))
    except Exception as e:
        logger.debug("modes: %s raised %r, treating as no match", predicate.__name__, e)
        return False
