"""Shared request parameters and body base class."""

from typing import Annotated

from fastapi import Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blogger.application.pagination import PageRequest
from blogger.domain.value import SortDirection


class CamelModel(BaseModel):
    """Request body read with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def page_params(
    page_number: Annotated[int, Query(alias="pageNumber", ge=1)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", ge=1, le=50)] = 10,
    sort_direction: Annotated[
        SortDirection, Query(alias="sortDirection")
    ] = SortDirection.DESC,
) -> PageRequest:
    """Read pagination query parameters."""
    return PageRequest(
        page_number=page_number, page_size=page_size, sort_direction=sort_direction
    )
