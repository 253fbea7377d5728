from sqlalchemy import Column, DateTime, Integer, String, Text, func
from homestay.db import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    author = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    published_at = Column(DateTime, server_default=func.now(), nullable=False)
