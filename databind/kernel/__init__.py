"""
databind Kernel — the pure engine.

Four components:
  entities  — Field / Prop / Dataset predicates and constructors
  actions   — constructors for the five action variants
  modes     — (state) → AppMode, classified by shape
  reducer   — (state, action) → state  (pure, mode-scoped)
"""

from databind.kernel.actions import (
    action_from_dict,
    bind_prop,
    clear_dataset,
    clear_prop,
    init_app,
    select_dataset,
)
from databind.kernel.entities import (
    dataset_of,
    field_of,
    is_dataset,
    is_field,
    is_prop,
    prop_of,
    validate_entity,
)
from databind.kernel.errors import (
    IllegalTransitionError,
    InvalidStateError,
    KernelError,
    UnimplementedTransitionError,
    ValidationError,
)
from databind.kernel.modes import mode_of
from databind.kernel.reducer import apply, empty_state, legal_actions, reduce, replay
from databind.kernel.types import AppMode, AppState, Mode

__all__ = [
    "field_of",
    "prop_of",
    "dataset_of",
    "is_field",
    "is_prop",
    "is_dataset",
    "validate_entity",
    "init_app",
    "select_dataset",
    "clear_dataset",
    "bind_prop",
    "clear_prop",
    "action_from_dict",
    "mode_of",
    "reduce",
    "apply",
    "replay",
    "empty_state",
    "legal_actions",
    "AppState",
    "AppMode",
    "Mode",
    "KernelError",
    "ValidationError",
    "InvalidStateError",
    "IllegalTransitionError",
    "UnimplementedTransitionError",
]
