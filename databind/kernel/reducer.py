"""
databind Kernel — Reducer

Pure function: (state, action) → state
No side effects. No IO. Deterministic. The input state is never modified.

Every call classifies the incoming state first, then hands the action to the
handlers of that mode only:

  init               app.init
  dataset_selection  dataset.select
  binding_selection  dataset.select (last write wins)
                     dataset.clear, prop.bind, prop.clear — declared, no reducer yet

Anything else raises IllegalTransitionError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from databind.kernel.errors import IllegalTransitionError, UnimplementedTransitionError
from databind.kernel.modes import mode_of
from databind.kernel.types import ACTION_CLASSES, AppState, InitApp, Mode, ReduceResult, SelectDataset

logger = logging.getLogger(__name__)

Handler = Callable[[AppState, Any], AppState]

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def empty_state() -> AppState:
    """The initial state: nothing loaded, nothing selected, nothing bound."""
    return AppState()


def reduce(state: AppState, action: Any) -> AppState:
    """
    Apply one action to the current state and return the new state.

    Raises:
      InvalidStateError       — state matches no mode
      IllegalTransitionError  — action not accepted in the state's mode,
                                or not an action at all
    """
    current = mode_of(state)
    if not isinstance(action, ACTION_CLASSES):
        raise IllegalTransitionError(current.mode, type(action).__name__)

    action_type = action.type

    if action_type in _UNIMPLEMENTED[current.mode]:
        raise UnimplementedTransitionError(current.mode, action_type)

    handler = _HANDLERS[current.mode].get(action_type)
    if handler is None:
        raise IllegalTransitionError(current.mode, action_type)

    new_state = handler(current.state, action)
    logger.debug("reducer: %s applied in mode %s", action_type, current.mode)
    return new_state


def apply(state: AppState, action: Any) -> ReduceResult:
    """
    Non-raising form of reduce(). Illegal transitions are returned as
    accepted=False with the unchanged state. InvalidStateError still raises.
    """
    try:
        new_state = reduce(state, action)
    except IllegalTransitionError as e:
        logger.warning("reducer: rejected %s in mode %s", e.action_type, e.mode)
        return ReduceResult(state=state, accepted=False, reason=str(e))
    return ReduceResult(state=new_state, accepted=True)


def replay(actions: Iterable[Any]) -> AppState:
    """
    Rebuild state from scratch by reducing over all actions.
    Rejected actions are skipped.
    """
    state = empty_state()
    for action in actions:
        result = apply(state, action)
        if result.accepted:
            state = result.state
    return state


def legal_actions(mode: Mode) -> frozenset[str]:
    """Action types that mode has a reducer for."""
    return frozenset(_HANDLERS[mode])


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _init_app(state: AppState, action: InitApp) -> AppState:
    return state.evolve(
        component_properties=action.props,
        available_datasets=tuple(d.name for d in action.datasets),
        dataset_fields={d.name: d.fields for d in action.datasets},
    )


def _select_dataset(state: AppState, action: SelectDataset) -> AppState:
    # Not checked against available_datasets.
    return state.evolve(selected_dataset=action.dataset)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

_HANDLERS: dict[Mode, dict[str, Handler]] = {
    Mode.INIT: {
        "app.init": _init_app,
    },
    Mode.DATASET_SELECTION: {
        "dataset.select": _select_dataset,
    },
    Mode.BINDING_SELECTION: {
        "dataset.select": _select_dataset,
    },
}

_UNIMPLEMENTED: dict[Mode, frozenset[str]] = {
    Mode.INIT: frozenset(),
    Mode.DATASET_SELECTION: frozenset(),
    Mode.BINDING_SELECTION: frozenset({"dataset.clear", "prop.bind", "prop.clear"}),
}
