from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from homestay.schemas.common import CamelModel, not_null


class PostBase(CamelModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1)
    author: Optional[str] = None
    image_url: Optional[str] = None


class PostCreate(PostBase):
    pass


class PostPatch(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("title", "slug", "content", "category")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class PostRead(PostBase):
    id: int
    published_at: datetime
