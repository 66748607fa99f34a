from tailor_configurator.core.application.workflows.restore.restore_design_workflow import (
    RestoreDesignWorkflow,
    RestoreOutcome,
    RestoreRequest,
)
from tailor_configurator.core.application.workflows.restore.restore_state import (
    ALLOWED_TRANSITIONS,
    RestoreFailureReason,
    RestoreHalted,
    RestoreState,
    RestoreStateMachine,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "RestoreDesignWorkflow",
    "RestoreFailureReason",
    "RestoreHalted",
    "RestoreOutcome",
    "RestoreRequest",
    "RestoreState",
    "RestoreStateMachine",
]
