import logging
from typing import Optional
from homestay.models.room import Room
from homestay.schemas.room import RoomRead
from homestay.storage.base import Repository
from homestay.storage.serialization import ListField

logger = logging.getLogger(__name__)


class RoomRepository(Repository):
    model = Room
    read_schema = RoomRead
    entity = "Room"
    list_fields = (ListField("Room", "amenities"), ListField("Room", "images"))

    def _order_by(self):
        return [Room.created_at.desc(), Room.id.desc()]

    def search(
        self,
        type: Optional[str] = None,
        status: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
    ):
        """List rooms matching every supplied filter, newest first."""
        query = self.db.query(Room)
        if type is not None:
            query = query.filter(Room.type == type)
        if status is not None:
            query = query.filter(Room.status == status)
        if min_price is not None:
            query = query.filter(Room.price >= min_price)
        if max_price is not None:
            query = query.filter(Room.price <= max_price)
        with self._guard("search Room"):
            rows = query.order_by(*self._order_by()).all()
        logger.debug(
            f"Room search type={type} status={status} price=[{min_price}, {max_price}]: {len(rows)} rows"
        )
        return [self._to_read(row) for row in rows]
