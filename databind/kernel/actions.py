"""
databind Kernel — Action Construction

Factory functions for creating well-formed actions.
Used by callers to build actions before dispatching them to the reducer,
and by tests to build actions concisely.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pydantic
from pydantic import TypeAdapter

from databind.kernel.errors import ValidationError
from databind.kernel.types import (
    Action,
    BindProp,
    ClearDataset,
    ClearProp,
    Dataset,
    InitApp,
    Prop,
    SelectDataset,
)

_ACTION_ADAPTER: TypeAdapter = TypeAdapter(Action)


def init_app(props: Sequence[Prop | dict[str, Any]], datasets: Sequence[Dataset | dict[str, Any]]) -> InitApp:
    """
    Build an InitApp action. Both sequences must be non-empty and every
    element must be a valid Prop / Dataset.
    """
    return _build(InitApp, props=props, datasets=datasets)


def select_dataset(dataset: str) -> SelectDataset:
    return _build(SelectDataset, dataset=dataset)


def clear_dataset() -> ClearDataset:
    return ClearDataset()


def bind_prop(prop: str, field: str) -> BindProp:
    return _build(BindProp, prop=prop, field=field)


def clear_prop(prop: str) -> ClearProp:
    return _build(ClearProp, prop=prop)


def action_from_dict(d: dict[str, Any]) -> Action:
    """
    Parse a plain mapping such as {"type": "dataset.select", "dataset": "Catalog"}
    into the matching action variant. The `type` tag picks the variant.
    """
    try:
        return _ACTION_ADAPTER.validate_python(d)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic("action", exc) from exc


def _build(model: type[pydantic.BaseModel], **values: Any) -> Any:
    try:
        return model(**values)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(model.model_fields["type"].default, exc) from exc
