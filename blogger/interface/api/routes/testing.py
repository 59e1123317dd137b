"""Test data reset routes.

Mounted outside production only.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from blogger.application.usecase.testing import DeleteAllDataUseCase

router = APIRouter(prefix="/testing", tags=["testing"], route_class=DishkaRoute)


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_data(
    delete_all_data_use_case: FromDishka[DeleteAllDataUseCase],
) -> None:
    """Delete blogs, posts, comments, likes and users."""
    await delete_all_data_use_case.execute()
