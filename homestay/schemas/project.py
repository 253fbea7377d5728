from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator
from homestay.schemas.common import CamelModel, not_null


class ProjectBase(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    slogan: Optional[str] = None
    description: str = Field(min_length=1)
    airbnb_url: Optional[str] = None
    is_featured: bool = False
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = None
    type: str = "homestay"


class ProjectCreate(ProjectBase):
    pass


class ProjectPatch(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    slogan: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=1)
    airbnb_url: Optional[str] = None
    is_featured: Optional[bool] = None
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = None
    type: Optional[str] = None

    @field_validator("name", "slug", "description", "is_featured", "type")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class ProjectRead(ProjectBase):
    id: int
    tags: List[str] = []
    images: List[str] = []
    created_at: datetime
