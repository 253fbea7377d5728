import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.schemas.common import MAX_INTEGER, DeleteResponse
from homestay.schemas.room import RoomRead, RoomSave, RoomStatus, RoomType
from homestay.storage.rooms import RoomRepository
from homestay.utils.auth import get_current_user
from homestay.utils.validation_helpers import not_found, parse_id

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/rooms",
    tags=["rooms"],
)

admin_router = APIRouter(
    prefix="/api/admin/rooms",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[RoomRead])
def list_available_rooms(db: Session = Depends(get_db)):
    """
    Rooms currently open for booking.
    """
    return RoomRepository(db).search(status="available")


@admin_router.get("", response_model=List[RoomRead])
def list_rooms(
    room_type: Optional[RoomType] = Query(None, alias="type"),
    room_status: Optional[RoomStatus] = Query(None, alias="status"),
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0, le=MAX_INTEGER),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0, le=MAX_INTEGER),
    db: Session = Depends(get_db),
):
    """
    Retrieve rooms, newest first.

    - **type**: only rooms of this type.
    - **status**: only rooms in this status.
    - **minPrice** / **maxPrice**: inclusive price bounds.
    """
    return RoomRepository(db).search(
        type=room_type, status=room_status, min_price=min_price, max_price=max_price
    )


@admin_router.get("/id/{room_id}", response_model=RoomRead)
def get_room(room_id: str, db: Session = Depends(get_db)):
    record_id = parse_id(room_id, "Room")
    room = RoomRepository(db).get_by_id(record_id)
    if room is None:
        logger.error(f"Room not found: {record_id}")
        raise not_found("Room", record_id)
    return room


@admin_router.post("/save", response_model=RoomRead, status_code=status.HTTP_201_CREATED)
def save_room(room: RoomSave, response: Response, db: Session = Depends(get_db)):
    """
    Create or update a room.

    A body carrying **id** updates that room (200) and only the fields sent
    are changed. A body without **id** creates a new room (201).
    """
    rooms = RoomRepository(db)
    if room.id is None:
        created = rooms.create(room)
        logger.info(f"Created room {created.id}")
        return created

    updated = rooms.update(room.id, room)
    if updated is None:
        logger.error(f"Room not found: {room.id}")
        raise not_found("Room", room.id)
    logger.info(f"Updated room {room.id}")
    response.status_code = status.HTTP_200_OK
    return updated


@admin_router.delete("/{room_id}", response_model=DeleteResponse)
def delete_room(room_id: str, db: Session = Depends(get_db)):
    record_id = parse_id(room_id, "Room")
    if not RoomRepository(db).delete(record_id):
        logger.error(f"Room not found: {record_id}")
        raise not_found("Room", record_id)
    logger.info(f"Deleted room {record_id}")
    return DeleteResponse(success=True, message="Room deleted successfully")
