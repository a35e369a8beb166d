"""Shared schema building blocks."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase.

    Accepts both snake_case and camelCase on input and reads ORM objects.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    """Paging metadata for list responses."""

    page: int
    limit: int
    total: int
    total_pages: int


class MessageResponse(BaseModel):
    """Plain message envelope."""

    message: str
