"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases receive the raw session token and resolve the actor
    themselves; an absent or invalid token means an anonymous actor.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
