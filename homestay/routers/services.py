import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.schemas.common import DeleteResponse
from homestay.schemas.service import ServiceCreate, ServicePatch, ServiceRead
from homestay.storage.services import ServiceRepository
from homestay.utils.auth import get_current_user
from homestay.utils.validation_helpers import not_found, parse_id, require_changes

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/services",
    tags=["services"],
)

admin_router = APIRouter(
    prefix="/api/admin/services",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[ServiceRead])
def list_services(db: Session = Depends(get_db)):
    return ServiceRepository(db).list()


@admin_router.get("", response_model=List[ServiceRead])
def admin_list_services(db: Session = Depends(get_db)):
    return ServiceRepository(db).list()


@admin_router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
def create_service(service: ServiceCreate, db: Session = Depends(get_db)):
    created = ServiceRepository(db).create(service)
    logger.info(f"Created service {created.id}")
    return created


@admin_router.put("/{service_id}", response_model=ServiceRead)
def update_service(service_id: str, changes: ServicePatch, db: Session = Depends(get_db)):
    record_id = parse_id(service_id, "Service")
    require_changes(changes)
    updated = ServiceRepository(db).update(record_id, changes)
    if updated is None:
        logger.error(f"Service not found: {record_id}")
        raise not_found("Service", record_id)
    return updated


@admin_router.delete("/{service_id}", response_model=DeleteResponse)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    record_id = parse_id(service_id, "Service")
    if not ServiceRepository(db).delete(record_id):
        logger.error(f"Service not found: {record_id}")
        raise not_found("Service", record_id)
    return DeleteResponse(success=True, message="Service deleted successfully")
