from typing import Optional
from pydantic import Field, field_validator
from homestay.schemas.common import CamelModel, not_null


class ServiceBase(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    icon: Optional[str] = None


class ServiceCreate(ServiceBase):
    pass


class ServicePatch(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    icon: Optional[str] = None

    @field_validator("title", "description")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class ServiceRead(ServiceBase):
    id: int
