from pydantic import BaseModel


class EntityStats(BaseModel):
    total: int
    # Percent change against a baseline of 80% of the current total.
    growth: int


class DashboardStats(BaseModel):
    projects: EntityStats
    services: EntityStats
    posts: EntityStats
    messages: EntityStats
    rooms: EntityStats


class DashboardResponse(BaseModel):
    stats: DashboardStats
