"""
databind Kernel — Entity Validation and Construction

Validates Field, Prop, and Dataset shapes and builds the frozen models.
Validation is structural (well-formed?) not semantic (does the dataset exist?).

Two surfaces over the same pydantic models:
  is_field / is_prop / is_dataset  — total predicates, never raise
  field_of / prop_of / dataset_of  — constructors, raise ValidationError
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pydantic
from pydantic import TypeAdapter

from databind.kernel.errors import ValidationError, format_errors
from databind.kernel.types import Dataset, Field, Prop

_ADAPTERS: dict[str, TypeAdapter] = {
    "field": TypeAdapter(Field),
    "prop": TypeAdapter(Prop),
    "dataset": TypeAdapter(Dataset),
}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_entity(kind: str, value: Any) -> list[str]:
    """
    Validate a candidate entity's shape.
    Returns a list of error strings. Empty list = valid.

    Accepts constructed models or plain mappings with the same keys.
    A Dataset is valid only if every element of its fields is a valid Field.
    """
    adapter = _ADAPTERS.get(kind)
    if adapter is None:
        return [f"Unknown entity kind: {kind}"]

    try:
        adapter.validate_python(value)
    except pydantic.ValidationError as exc:
        return format_errors(exc)
    return []


def is_field(value: Any) -> bool:
    return not validate_entity("field", value)


def is_prop(value: Any) -> bool:
    return not validate_entity("prop", value)


def is_dataset(value: Any) -> bool:
    return not validate_entity("dataset", value)


def is_field_list(values: Any) -> bool:
    return _is_list_of(is_field, values)


def is_prop_list(values: Any) -> bool:
    return _is_list_of(is_prop, values)


def is_dataset_list(values: Any) -> bool:
    return _is_list_of(is_dataset, values)


def field_of(name: str, type: str) -> Field:
    """Build a Field. Raises ValidationError on malformed input."""
    return _build("field", Field, name=name, type=type)


def prop_of(name: str, types: Sequence[str]) -> Prop:
    """Build a Prop. Raises ValidationError on malformed input."""
    return _build("prop", Prop, name=name, types=types)


def dataset_of(name: str, controller_ref: Any, fields: Sequence[Any]) -> Dataset:
    """
    Build a Dataset. Each element of fields may be a Field or a mapping
    with exactly `name` and `type`; anything else raises ValidationError.
    """
    return _build("dataset", Dataset, name=name, controller_ref=controller_ref, fields=fields)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_list_of(predicate, values: Any) -> bool:
    if not isinstance(values, list | tuple):
        return False
    return all(predicate(v) for v in values)


def _build(kind: str, model: type[pydantic.BaseModel], **values: Any) -> Any:
    try:
        return model(**values)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(kind, exc) from exc
