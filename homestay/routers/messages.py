import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.schemas.message import MessageCreate, MessageRead
from homestay.storage.messages import MessageRepository
from homestay.utils.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/contact",
    tags=["contact"],
)

admin_router = APIRouter(
    prefix="/api/admin/messages",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def submit_message(message: MessageCreate, db: Session = Depends(get_db)):
    """
    Store a message sent through the contact form.
    """
    created = MessageRepository(db).create(message)
    logger.info(f"Contact message {created.id} received")
    return created


@admin_router.get("", response_model=List[MessageRead])
def list_messages(db: Session = Depends(get_db)):
    return MessageRepository(db).list()
