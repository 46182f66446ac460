"""
databind Kernel — Shared Types

Value types used across entities, actions, modes, and the reducer.
These are the contracts that bind the kernel together.

Every model is frozen: once constructed, a Field, Prop, Dataset, action, or
AppState never changes. The reducer builds new AppState records instead.

Actions form a closed tagged union discriminated by `type`:
  app.init        InitApp        {props, datasets}
  dataset.select  SelectDataset  {dataset}
  dataset.clear   ClearDataset   {}
  prop.bind       BindProp       {prop, field}
  prop.clear      ClearProp      {prop}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, StrictStr, field_serializer, field_validator

from databind.kernel.errors import ValidationError

_FROZEN = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Field(BaseModel):
    """A column of a dataset, e.g. Field(name="price", type="Number")."""

    model_config = _FROZEN

    name: StrictStr
    type: StrictStr


class Prop(BaseModel):
    """A bindable component property and the field types it accepts."""

    model_config = _FROZEN

    name: StrictStr
    types: tuple[StrictStr, ...]


class Dataset(BaseModel):
    """
    A named source of records. controller_ref is opaque to the kernel;
    it only has to be present.
    """

    model_config = _FROZEN

    name: StrictStr
    controller_ref: Any
    fields: tuple[Field, ...]

    @field_validator("controller_ref")
    @classmethod
    def _controller_ref_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("controller_ref must not be null")
        return value


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


class InitApp(BaseModel):
    """
    Load the component's props and the host's datasets.

    Both sequences must be non-empty. An empty list is a well-formed Prop or
    Dataset sequence, but init with it would leave the state in init mode
    (or in no mode at all), so construction raises ValidationError instead.
    """

    model_config = _FROZEN

    type: Literal["app.init"] = "app.init"
    props: tuple[Prop, ...] = pydantic.Field(min_length=1)
    datasets: tuple[Dataset, ...] = pydantic.Field(min_length=1)


class SelectDataset(BaseModel):
    model_config = _FROZEN

    type: Literal["dataset.select"] = "dataset.select"
    dataset: StrictStr


class ClearDataset(BaseModel):
    model_config = _FROZEN

    type: Literal["dataset.clear"] = "dataset.clear"


class BindProp(BaseModel):
    model_config = _FROZEN

    type: Literal["prop.bind"] = "prop.bind"
    prop: StrictStr
    field: StrictStr


class ClearProp(BaseModel):
    model_config = _FROZEN

    type: Literal["prop.clear"] = "prop.clear"
    prop: StrictStr


Action = Annotated[
    InitApp | SelectDataset | ClearDataset | BindProp | ClearProp,
    pydantic.Field(discriminator="type"),
]

ACTION_CLASSES: tuple[type[BaseModel], ...] = (
    InitApp,
    SelectDataset,
    ClearDataset,
    BindProp,
    ClearProp,
)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class AppState(BaseModel):
    """
    The binding panel's current state.

    - component_properties: props exposed by the component
    - available_datasets: dataset names, in the order the host offered them
    - dataset_fields: dataset name → its fields
    - selected_dataset: name of the chosen dataset, or None
    - bindings: prop name → field name

    The mode is never stored here; it is derived by modes.mode_of().
    Both mappings are stored as read-only copies, so states produced by the
    reducer never share mutable containers.
    """

    model_config = _FROZEN

    component_properties: tuple[Prop, ...] = ()
    available_datasets: tuple[StrictStr, ...] = ()
    dataset_fields: Mapping[str, tuple[Field, ...]] = pydantic.Field(default_factory=dict, validate_default=True)
    selected_dataset: StrictStr | None = None
    bindings: Mapping[str, StrictStr] = pydantic.Field(default_factory=dict, validate_default=True)

    @field_validator("dataset_fields", "bindings")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("dataset_fields", "bindings")
    def _plain_dict(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((
            self.component_properties,
            self.available_datasets,
            tuple(sorted(self.dataset_fields.items())),
            self.selected_dataset,
            tuple(sorted(self.bindings.items())),
        ))

    def evolve(self, **changes: Any) -> AppState:
        """A new validated state with the given fields replaced."""
        return type(self)(**{**dict(self), **changes})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AppState:
        try:
            return cls.model_validate(d)
        except pydantic.ValidationError as exc:
            raise ValidationError.from_pydantic("state", exc) from exc


class Mode(StrEnum):
    """Application modes, in classification order."""

    INIT = "init"
    DATASET_SELECTION = "dataset_selection"
    BINDING_SELECTION = "binding_selection"


@dataclass(frozen=True)
class AppMode:
    """A state paired with the mode it was classified as."""

    mode: Mode
    state: AppState


class ReduceResult:
    """
    Result of apply(): the non-raising form of reduce().
    Illegal transitions come back as accepted=False with a reason.
    """

    __slots__ = ("state", "accepted", "reason")

    def __init__(self, state: AppState, accepted: bool, reason: str | None = None) -> None:
        self.state = state
        self.accepted = accepted
        self.reason = reason

    def __repr__(self) -> str:  # pragma: no cover
        if self.accepted:
            return "ReduceResult(accepted=True)"
        return f"ReduceResult(accepted=False, reason={self.reason!r})"
