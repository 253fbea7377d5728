from sqlalchemy import Column, DateTime, Integer, String, Text, func
from homestay.db import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    type = Column(String, nullable=False)
    price = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default="available")
    # Soft reference: no ForeignKey, deletes are guarded in ProjectRepository.
    project_id = Column(Integer, index=True, nullable=True)
    description = Column(Text, nullable=True)
    amenities = Column(Text, nullable=True)
    images = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
