from datetime import datetime
from pydantic import EmailStr, Field
from homestay.schemas.common import CamelModel


class MessageCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1)


class MessageRead(CamelModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime
