from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T_Request = TypeVar("T_Request")
T_Outcome = TypeVar("T_Outcome")


class BaseWorkflow(ABC, Generic[T_Request, T_Outcome]):
    """Abstract base for deterministic, step-by-step async workflows."""

    @abstractmethod
    async def execute(self, request: T_Request) -> T_Outcome:
        """Run every step for ``request`` and return its outcome."""
