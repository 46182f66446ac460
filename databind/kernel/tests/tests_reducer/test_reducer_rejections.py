"""
databind Reducer — Rejection Tests

Illegal action/mode combinations raise IllegalTransitionError; declared but
unbuilt binding reducers raise UnimplementedTransitionError; malformed states
raise InvalidStateError. apply() turns transition errors into rejected results.
"""

import logging

import pytest

from databind.kernel.actions import bind_prop, clear_dataset, clear_prop, init_app, select_dataset
from databind.kernel.errors import (
    IllegalTransitionError,
    InvalidStateError,
    UnimplementedTransitionError,
)
from databind.kernel.reducer import apply, empty_state, reduce
from databind.kernel.types import AppState, Mode


@pytest.fixture
def empty():
    return empty_state()


@pytest.fixture
def init_action(value_prop, catalog):
    return init_app(props=[value_prop], datasets=[catalog])


@pytest.fixture
def after_init(empty, init_action):
    return reduce(empty, init_action)


@pytest.fixture
def selected(after_init):
    return reduce(after_init, select_dataset("Catalog"))


# ============================================================================
# init mode
# ============================================================================


class TestInitModeRejections:
    def test_select_before_init(self, empty):
        with pytest.raises(IllegalTransitionError) as exc:
            reduce(empty, select_dataset("Catalog"))
        assert exc.value.mode == Mode.INIT
        assert exc.value.action_type == "dataset.select"
        assert "ILLEGAL_TRANSITION" in str(exc.value)

    @pytest.mark.parametrize("action", [clear_dataset(), bind_prop("value", "title"), clear_prop("value")])
    def test_binding_actions_are_illegal_not_unimplemented(self, empty, action):
        with pytest.raises(IllegalTransitionError) as exc:
            reduce(empty, action)
        assert not isinstance(exc.value, UnimplementedTransitionError)


# ============================================================================
# dataset_selection mode
# ============================================================================


class TestDatasetSelectionRejections:
    def test_second_init(self, after_init, init_action):
        with pytest.raises(IllegalTransitionError) as exc:
            reduce(after_init, init_action)
        assert exc.value.mode == Mode.DATASET_SELECTION

    def test_bind_before_select(self, after_init):
        with pytest.raises(IllegalTransitionError):
            reduce(after_init, bind_prop("value", "title"))


# ============================================================================
# binding_selection mode
# ============================================================================


class TestBindingSelectionRejections:
    def test_init_after_selection(self, selected, init_action):
        with pytest.raises(IllegalTransitionError) as exc:
            reduce(selected, init_action)
        assert exc.value.mode == Mode.BINDING_SELECTION

    @pytest.mark.parametrize(
        "action",
        [clear_dataset(), bind_prop("value", "title"), clear_prop("value")],
        ids=["dataset.clear", "prop.bind", "prop.clear"],
    )
    def test_binding_actions_are_unimplemented(self, selected, action):
        with pytest.raises(UnimplementedTransitionError) as exc:
            reduce(selected, action)
        assert isinstance(exc.value, IllegalTransitionError)
        assert isinstance(exc.value, NotImplementedError)
        assert exc.value.action_type == action.type
        assert "UNIMPLEMENTED_TRANSITION" in str(exc.value)

    def test_unknown_action_object(self, selected):
        with pytest.raises(IllegalTransitionError) as exc:
            reduce(selected, object())
        assert exc.value.action_type == "object"

    def test_lookalike_action_is_rejected(self, empty):
        class FakeInit:
            type = "app.init"

        with pytest.raises(IllegalTransitionError) as exc:
            reduce(empty, FakeInit())
        assert exc.value.action_type == "FakeInit"
        assert not isinstance(exc.value, UnimplementedTransitionError)


# ============================================================================
# Invalid states
# ============================================================================


class TestInvalidState:
    def test_partial_state(self, value_prop):
        with pytest.raises(InvalidStateError):
            reduce(AppState(component_properties=(value_prop,)), select_dataset("Catalog"))

    def test_non_state(self, init_action):
        with pytest.raises(InvalidStateError):
            reduce(None, init_action)

    def test_apply_does_not_swallow_invalid_state(self):
        with pytest.raises(InvalidStateError):
            apply(AppState(available_datasets=("Catalog",)), select_dataset("Catalog"))


# ============================================================================
# apply()
# ============================================================================


class TestApply:
    def test_rejected_result_keeps_state(self, empty):
        result = apply(empty, select_dataset("Catalog"))
        assert not result.accepted
        assert result.state is empty
        assert "ILLEGAL_TRANSITION" in result.reason

    def test_accepted_result(self, empty, init_action):
        result = apply(empty, init_action)
        assert result.accepted
        assert result.reason is None
        assert result.state.available_datasets == ("Catalog",)

    def test_unimplemented_is_rejected(self, selected):
        result = apply(selected, bind_prop("value", "title"))
        assert not result.accepted
        assert "UNIMPLEMENTED_TRANSITION" in result.reason

    def test_rejection_is_logged(self, empty, caplog):
        with caplog.at_level(logging.WARNING, logger="databind.kernel.reducer"):
            apply(empty, select_dataset("Catalog"))
        assert "rejected dataset.select" in caplog.text
