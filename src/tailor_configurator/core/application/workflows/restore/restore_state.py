"""States, failure reasons and legal transitions of a single restore attempt."""

from enum import StrEnum

from tailor_configurator.core.application.exceptions import (
    ConfiguratorError,
    InvalidStateTransition,
)


class RestoreState(StrEnum):
    IDLE = "idle"
    LOCATING = "locating"
    HYDRATING = "hydrating"
    APPLYING = "applying"
    DONE = "done"
    FAILED = "failed"


class RestoreFailureReason(StrEnum):
    NOT_FOUND = "not_found"
    CATALOG_TIMEOUT = "catalog_timeout"
    DISCARDED = "discarded"
    PRODUCT_MISMATCH = "product_mismatch"


# IDLE -> DONE is the idempotent no-op for a design already applied to the store.
ALLOWED_TRANSITIONS: dict[RestoreState, frozenset[RestoreState]] = {
    RestoreState.IDLE: frozenset({RestoreState.LOCATING, RestoreState.DONE}),
    RestoreState.LOCATING: frozenset({RestoreState.HYDRATING, RestoreState.FAILED}),
    RestoreState.HYDRATING: frozenset({RestoreState.APPLYING, RestoreState.FAILED}),
    RestoreState.APPLYING: frozenset({RestoreState.DONE}),
    RestoreState.DONE: frozenset(),
    RestoreState.FAILED: frozenset(),
}


class RestoreHalted(ConfiguratorError):
    """Stops a restore attempt before any mutation, with the reason reported to the caller."""

    def __init__(self, reason: RestoreFailureReason, message: str = "", **context: object) -> None:
        super().__init__(message or reason.value, context=dict(context))
        self.reason = reason


class RestoreStateMachine:
    def __init__(self) -> None:
        self._state = RestoreState.IDLE
        self._history: list[RestoreState] = [RestoreState.IDLE]
        self._failure: RestoreFailureReason | None = None

    @property
    def state(self) -> RestoreState:
        return self._state

    @property
    def history(self) -> tuple[RestoreState, ...]:
        return tuple(self._history)

    @property
    def failure(self) -> RestoreFailureReason | None:
        return self._failure

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self._state]

    def transition(self, target: RestoreState) -> None:
        if target not in ALLOWED_TRANSITIONS[self._state]:
            raise InvalidStateTransition(
                f"Illegal restore transition {self._state.value} -> {target.value}",
                context={"from": self._state.value, "to": target.value},
            )
        self._state = target
        self._history.append(target)

    def fail(self, reason: RestoreFailureReason) -> None:
        self.transition(RestoreState.FAILED)
        self._failure = reason
