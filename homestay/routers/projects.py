import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.errors import ApiError
from homestay.schemas.common import DeleteResponse
from homestay.schemas.project import ProjectCreate, ProjectPatch, ProjectRead
from homestay.storage.projects import ProjectRepository
from homestay.utils.auth import get_current_user
from homestay.utils.validation_helpers import not_found, parse_id, require_changes

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
)

admin_router = APIRouter(
    prefix="/api/admin/projects",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[ProjectRead])
def list_projects(db: Session = Depends(get_db)):
    """
    Retrieve all projects, newest first.
    """
    return ProjectRepository(db).list()


@router.get("/id/{project_id}", response_model=ProjectRead)
def get_project_by_id(project_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a project by numeric ID.
    """
    record_id = parse_id(project_id, "Project")
    project = ProjectRepository(db).get_by_id(record_id)
    if project is None:
        logger.error(f"Project not found: {record_id}")
        raise not_found("Project", record_id)
    return project


@router.get("/{slug}", response_model=ProjectRead)
def get_project(slug: str, db: Session = Depends(get_db)):
    """
    Retrieve a project by its slug.
    """
    project = ProjectRepository(db).get_by_slug(slug)
    if project is None:
        raise ApiError(status_code=status.HTTP_404_NOT_FOUND, message="Project not found")
    return project


@admin_router.get("", response_model=List[ProjectRead])
def admin_list_projects(db: Session = Depends(get_db)):
    return ProjectRepository(db).list()


@admin_router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    """
    Create a project. A slug already in use is rejected with 409.
    """
    created = ProjectRepository(db).create(project)
    logger.info(f"Created project {created.id} ({created.slug})")
    return created


@admin_router.put("/{project_id}", response_model=ProjectRead)
def update_project(project_id: str, changes: ProjectPatch, db: Session = Depends(get_db)):
    """
    Update the supplied fields of a project; others keep their values.
    """
    record_id = parse_id(project_id, "Project")
    require_changes(changes)
    updated = ProjectRepository(db).update(record_id, changes)
    if updated is None:
        logger.error(f"Project not found: {record_id}")
        raise not_found("Project", record_id)
    logger.info(f"Updated project {record_id}")
    return updated


@admin_router.delete("/{project_id}", response_model=DeleteResponse)
def delete_project(project_id: str, db: Session = Depends(get_db)):
    """
    Delete a project. Refused with 409 while rooms still reference it.
    """
    record_id = parse_id(project_id, "Project")
    if not ProjectRepository(db).delete(record_id):
        logger.error(f"Project not found: {record_id}")
        raise not_found("Project", record_id)
    logger.info(f"Deleted project {record_id}")
    return DeleteResponse(success=True, message="Project deleted successfully")
