from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func
from homestay.db import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    slogan = Column(String, nullable=True)
    description = Column(Text, nullable=False)
    airbnb_url = Column(String, nullable=True)
    is_featured = Column(Boolean, default=False)
    # JSON array text, see homestay.storage.serialization
    tags = Column(Text, nullable=True)
    images = Column(Text, nullable=True)
    type = Column(String, default="homestay")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
