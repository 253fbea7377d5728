from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.schemas.dashboard import DashboardResponse, DashboardStats, EntityStats
from homestay.storage.messages import MessageRepository
from homestay.storage.posts import PostRepository
from homestay.storage.projects import ProjectRepository
from homestay.storage.rooms import RoomRepository
from homestay.storage.services import ServiceRepository
from homestay.utils.auth import get_current_user

router = APIRouter(
    prefix="/api/admin/dashboard",
    tags=["admin"],
    dependencies=[Depends(get_current_user)],
)

BASELINE_RATIO = 0.8


def growth_percent(total: int) -> int:
    """
    Placeholder growth figure.

    There is no history table, so the "previous" value is taken to be 80% of
    the current total. Any non-empty table therefore reports 25%.
    """
    baseline = total * BASELINE_RATIO
    if baseline == 0:
        return 0
    return round((total - baseline) / baseline * 100)


def entity_stats(total: int) -> EntityStats:
    return EntityStats(total=total, growth=growth_percent(total))


@router.get("", response_model=DashboardResponse)
def dashboard(db: Session = Depends(get_db)):
    stats = DashboardStats(
        projects=entity_stats(ProjectRepository(db).count()),
        services=entity_stats(ServiceRepository(db).count()),
        posts=entity_stats(PostRepository(db).count()),
        messages=entity_stats(MessageRepository(db).count()),
        rooms=entity_stats(RoomRepository(db).count()),
    )
    return DashboardResponse(stats=stats)
