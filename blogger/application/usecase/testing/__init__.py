"""Test data management use cases."""

from .delete_all_data import DeleteAllDataUseCase

__all__ = ["DeleteAllDataUseCase"]
