import logging
from sqlalchemy import func
from homestay.models.project import Project
from homestay.models.room import Room
from homestay.schemas.project import ProjectRead
from homestay.storage.base import Repository
from homestay.storage.errors import ConflictError
from homestay.storage.serialization import ListField

logger = logging.getLogger(__name__)


class ProjectRepository(Repository):
    model = Project
    read_schema = ProjectRead
    entity = "Project"
    list_fields = (ListField("Project", "tags"), ListField("Project", "images"))
    unique_fields = ("slug",)

    def _order_by(self):
        return [Project.created_at.desc(), Project.id.desc()]

    def get_by_slug(self, slug: str):
        with self._guard(f"get Project {slug!r}"):
            row = self.db.query(Project).filter(Project.slug == slug).first()
        return self._to_read(row) if row else None

    def delete(self, record_id: int) -> bool:
        """Delete a project unless rooms still reference it."""
        with self._guard(f"count rooms of Project {record_id}"):
            rooms = (
                self.db.query(func.count(Room.id))
                .filter(Room.project_id == record_id)
                .scalar()
            )
        if rooms:
            logger.error(f"Project {record_id} still referenced by {rooms} room(s)")
            raise ConflictError(
                f"Project with ID {record_id} is referenced by {rooms} room(s)",
                field="projectId",
            )
        return super().delete(record_id)
