"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from blogger.domain.error import NotFoundError
from blogger.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, resource: str) -> UUID:
    """Parse an identifier taken from a URL.

    A malformed identifier cannot name an existing resource, so it is
    reported as not found.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(resource, value)


def parse_viewer_id(value: Optional[str]) -> Optional[UserId]:
    """Parse the optional authenticated viewer of a read.

    A viewer id that is not a UUID cannot belong to a user, so the read
    is served anonymously.
    """
    if not value:
        return None
    try:
        return UserId(UUID(value))
    except ValueError:
        return None
