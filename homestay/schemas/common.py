from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every API model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Largest value an SQL BIGINT / SQLite INTEGER column can hold.
MAX_INTEGER = 2**63 - 1


def not_null(value):
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class ErrorResponse(BaseModel):
    message: str
    field: Optional[str] = None


class DeleteResponse(BaseModel):
    success: bool
    message: str
