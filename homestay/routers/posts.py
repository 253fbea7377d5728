import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.errors import ApiError
from homestay.schemas.common import DeleteResponse
from homestay.schemas.post import PostCreate, PostPatch, PostRead
from homestay.storage.posts import PostRepository
from homestay.utils.auth import get_current_user
from homestay.utils.validation_helpers import not_found, parse_id, require_changes

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/posts",
    tags=["posts"],
)

admin_router = APIRouter(
    prefix="/api/admin/posts",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[PostRead])
def list_posts(db: Session = Depends(get_db)):
    """Blog posts, most recently published first."""
    return PostRepository(db).list()


@router.get("/id/{post_id}", response_model=PostRead)
def get_post_by_id(post_id: str, db: Session = Depends(get_db)):
    record_id = parse_id(post_id, "Post")
    post = PostRepository(db).get_by_id(record_id)
    if post is None:
        raise not_found("Post", record_id)
    return post


@router.get("/{slug}", response_model=PostRead)
def get_post(slug: str, db: Session = Depends(get_db)):
    post = PostRepository(db).get_by_slug(slug)
    if post is None:
        raise ApiError(status_code=status.HTTP_404_NOT_FOUND, message="Post not found")
    return post


@admin_router.get("", response_model=List[PostRead])
def admin_list_posts(db: Session = Depends(get_db)):
    return PostRepository(db).list()


@admin_router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate, db: Session = Depends(get_db)):
    created = PostRepository(db).create(post)
    logger.info(f"Created post {created.id} ({created.slug})")
    return created


@admin_router.put("/{post_id}", response_model=PostRead)
def update_post(post_id: str, changes: PostPatch, db: Session = Depends(get_db)):
    record_id = parse_id(post_id, "Post")
    require_changes(changes)
    updated = PostRepository(db).update(record_id, changes)
    if updated is None:
        logger.error(f"Post not found: {record_id}")
        raise not_found("Post", record_id)
    return updated


@admin_router.delete("/{post_id}", response_model=DeleteResponse)
def delete_post(post_id: str, db: Session = Depends(get_db)):
    record_id = parse_id(post_id, "Post")
    if not PostRepository(db).delete(record_id):
        logger.error(f"Post not found: {record_id}")
        raise not_found("Post", record_id)
    return DeleteResponse(success=True, message="Post deleted successfully")
