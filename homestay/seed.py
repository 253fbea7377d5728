import logging
from sqlalchemy.orm import Session
from homestay.schemas.post import PostCreate
from homestay.schemas.project import ProjectCreate
from homestay.schemas.service import ServiceCreate
from homestay.storage.posts import PostRepository
from homestay.storage.projects import ProjectRepository
from homestay.storage.services import ServiceRepository

logger = logging.getLogger(__name__)

PROJECTS = [
    ProjectCreate(
        name="Camf",
        slug="camf",
        slogan="A second home in the heart of Hoi An",
        description=(
            "Located amidst the An My rice fields, Camf offers a serene escape with "
            "rustic charm and modern comforts. Perfect for those seeking tranquility."
        ),
        airbnb_url="https://airbnb.com",
        is_featured=True,
        tags=["Rice Fields", "Rustic", "Peaceful"],
        images=["https://images.unsplash.com/photo-1582268611958-ebfd161ef9cf?q=80&w=2940&auto=format&fit=crop"],
        type="homestay",
    ),
    ProjectCreate(
        name="Dù Dẻ",
        slug="du-de",
        slogan="Cozy, rustic, and peaceful",
        description=(
            "A place for family bonding, where simplicity meets warmth. "
            "Experience the authentic local lifestyle."
        ),
        airbnb_url="https://airbnb.com",
        is_featured=True,
        tags=["Family", "Cozy", "Authentic"],
        images=["https://images.unsplash.com/photo-1510798831971-661eb04b3739?q=80&w=2787&auto=format&fit=crop"],
        type="homestay",
    ),
    ProjectCreate(
        name="Tươi",
        slug="tuoi",
        slogan="A place to breathe deeply",
        description=(
            "Cast aside all worries and immerse yourself in nature. "
            "Tươi is designed to rejuvenate your spirit."
        ),
        airbnb_url="https://airbnb.com",
        is_featured=True,
        tags=["Nature", "Rejuvenation", "Wellness"],
        images=["https://images.unsplash.com/photo-1598928506311-c55ded91a20c?q=80&w=2940&auto=format&fit=crop"],
        type="homestay",
    ),
]

SERVICES = [
    ServiceCreate(
        title="Management & Operations",
        description="Comprehensive homestay management ensuring smooth operations and high guest satisfaction.",
        icon="settings",
    ),
    ServiceCreate(
        title="Business Consulting",
        description="Expert advice on homestay business models, pricing strategies, and market positioning.",
        icon="briefcase",
    ),
    ServiceCreate(
        title="Renovation",
        description="Transforming spaces into soulful homes with our design and renovation services.",
        icon="hammer",
    ),
]

POSTS = [
    PostCreate(
        title="Awakening the Soul of a Home",
        slug="awakening-soul",
        content=(
            "At INN HoiAn, we believe that every house has a soul waiting to be awakened. "
            "Our journey begins with understanding the history and the potential of each space..."
        ),
        category="Operating Stories",
        image_url="https://images.unsplash.com/photo-1513694203232-719a280e022f?q=80&w=2938&auto=format&fit=crop",
        author="INN Team",
    ),
    PostCreate(
        title="The Story of Tươi",
        slug="story-of-tuoi",
        content=(
            "Tươi was born from a desire to create a sanctuary. We found an old house "
            "covered in vines and saw its potential..."
        ),
        category="People & Stories",
        image_url="https://images.unsplash.com/photo-1615529182904-14819c35db37?q=80&w=2880&auto=format&fit=crop",
        author="Founder",
    ),
]


def seed_database(db: Session) -> bool:
    """Insert the starter content when no project exists yet. Returns True if it did."""
    projects = ProjectRepository(db)
    if projects.count() > 0:
        return False
    for project in PROJECTS:
        projects.create(project)
    services = ServiceRepository(db)
    for service in SERVICES:
        services.create(service)
    posts = PostRepository(db)
    for post in POSTS:
        posts.create(post)
    logger.info(
        f"Seeded {len(PROJECTS)} projects, {len(SERVICES)} services, {len(POSTS)} posts"
    )
    return True
