"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One user-facing operation.

    Use cases resolve identities and call domain services; they take a
    pydantic request and return a pydantic response or view.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the operation."""
