import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from homestay import config
from homestay.db import SessionLocal, init_database
from homestay.errors import register_exception_handlers
from homestay.routers import auth, dashboard, messages, posts, projects, rooms, services
from homestay.seed import seed_database
from homestay.storage.sessions import DatabaseSessionStore, MemorySessionStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    "lifespan for initing database"
    init_database()
    db = SessionLocal()
    try:
        if config.SEED_DATABASE:
            seed_database(db)
        store = getattr(application.state, "session_store", None)
        if store is None:
            store = DatabaseSessionStore(db)
        removed = store.prune()
        logger.debug(f"Pruned {removed} expired sessions")
    finally:
        db.close()
    yield


def create_app() -> FastAPI:
    application = FastAPI(
        lifespan=lifespan,
        title="INN HoiAn",
        description="Homestay website content API and admin CMS based on FastAPI.",
        version="0.1.0",
        license_info={
            "name": "MIT",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    if config.SESSION_BACKEND == "memory":
        application.state.session_store = MemorySessionStore()

    register_exception_handlers(application)

    application.include_router(auth.router)
    application.include_router(auth.user_router)
    application.include_router(projects.router)
    application.include_router(posts.router)
    application.include_router(services.router)
    application.include_router(rooms.router)
    application.include_router(messages.router)
    application.include_router(dashboard.router)
    application.include_router(projects.admin_router)
    application.include_router(posts.admin_router)
    application.include_router(services.admin_router)
    application.include_router(rooms.admin_router)
    application.include_router(messages.admin_router)
    return application


app = create_app()
