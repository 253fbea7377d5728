from fastapi import status
from homestay.errors import ApiError
from homestay.schemas.common import MAX_INTEGER


def parse_id(value, entity: str) -> int:
    """Parse a numeric path id or fail with 400 naming the entity."""
    text = str(value).strip()
    if not text.isdecimal() or int(text) > MAX_INTEGER:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=f"Invalid {entity.lower()} ID. ID must be a number.",
            field="id",
        )
    return int(text)


def require_changes(patch):
    if not patch.model_fields_set:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="No update data provided",
        )
    return patch


def not_found(entity: str, record_id) -> ApiError:
    return ApiError(
        status_code=status.HTTP_404_NOT_FOUND,
        message=f"{entity} with ID {record_id} not found",
    )
