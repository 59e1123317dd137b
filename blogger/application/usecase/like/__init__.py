"""Like use cases."""

from .update_like_status import (
    UpdateLikeStatusRequest,
    UpdateLikeStatusResponse,
    UpdateLikeStatusUseCase,
)

__all__ = [
    "UpdateLikeStatusRequest",
    "UpdateLikeStatusResponse",
    "UpdateLikeStatusUseCase",
]
