from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field, field_validator
from homestay.schemas.common import MAX_INTEGER, CamelModel, not_null

RoomType = Literal["single", "double", "twin", "suite"]
RoomStatus = Literal["available", "occupied", "maintenance"]


def check_price(value):
    if value is not None and value < 0:
        raise ValueError("Price must be positive")
    return value


class RoomBase(CamelModel):
    name: str = Field(min_length=1)
    type: RoomType
    price: int = Field(le=MAX_INTEGER)
    status: RoomStatus = "available"
    project_id: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    description: Optional[str] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, value):
        return check_price(value)


class RoomCreate(RoomBase):
    pass


class RoomSave(RoomBase):
    """Body of the save endpoint: an id routes to update, no id to create."""

    id: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)


class RoomPatch(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[RoomType] = None
    price: Optional[int] = Field(default=None, le=MAX_INTEGER)
    status: Optional[RoomStatus] = None
    project_id: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    description: Optional[str] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None

    @field_validator("name", "type", "price", "status")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, value):
        return check_price(value)


class RoomRead(RoomBase):
    id: int
    amenities: List[str] = []
    images: List[str] = []
    created_at: datetime
