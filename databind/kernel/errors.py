"""
databind Kernel — Errors

Every failure the kernel raises derives from KernelError. All of them are fatal
to the call that raised them; nothing here is retried.

  ValidationError              — an entity or action failed its shape checks
  InvalidStateError            — a state matches no application mode
  IllegalTransitionError       — the action is not accepted in the current mode
  UnimplementedTransitionError — the action is declared for the mode but has no reducer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pydantic


class KernelError(Exception):
    """Base class for kernel failures."""


class ValidationError(KernelError, ValueError):
    """Raised when constructing an entity or action from malformed input."""

    def __init__(self, kind: str, errors: list[str]) -> None:
        self.kind = kind
        self.errors = errors
        super().__init__(f"Invalid {kind}: " + "; ".join(errors))

    @classmethod
    def from_pydantic(cls, kind: str, exc: pydantic.ValidationError) -> ValidationError:
        return cls(kind, format_errors(exc))


class InvalidStateError(KernelError):
    """Raised when a state object corresponds to no application mode."""


class IllegalTransitionError(KernelError):
    """Raised when an action is dispatched against a mode that does not permit it."""

    def __init__(self, mode: str, action_type: str, message: str | None = None) -> None:
        self.mode = mode
        self.action_type = action_type
        super().__init__(message or f"ILLEGAL_TRANSITION: {action_type} is not accepted in mode {mode}")


class UnimplementedTransitionError(IllegalTransitionError, NotImplementedError):
    """The action belongs to the mode but its reducer has not been written yet."""

    def __init__(self, mode: str, action_type: str) -> None:
        super().__init__(
            mode,
            action_type,
            f"UNIMPLEMENTED_TRANSITION: {action_type} in mode {mode} has no reducer",
        )


def format_errors(exc: pydantic.ValidationError) -> list[str]:
    """Flatten a pydantic error into "loc: message" strings."""
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages
