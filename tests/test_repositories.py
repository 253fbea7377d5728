import pytest
from sqlalchemy.exc import OperationalError

from homestay.models.project import Project
from homestay.models.room import Room
from homestay.schemas.message import MessageCreate
from homestay.schemas.post import PostCreate
from homestay.schemas.project import ProjectCreate, ProjectPatch
from homestay.schemas.room import RoomCreate, RoomPatch
from homestay.schemas.service import ServiceCreate
from homestay.storage.errors import ConflictError, DuplicateError, StorageError
from homestay.storage.messages import MessageRepository
from homestay.storage.posts import PostRepository
from homestay.storage.projects import ProjectRepository
from homestay.storage.rooms import RoomRepository
from homestay.storage.services import ServiceRepository
from homestay.storage.users import UserRepository

from tests.conf_tests import clear_db, test_db


def make_project(slug="camf", **overrides):
    data = {
        "name": "Camf",
        "slug": slug,
        "description": "Rice field homestay",
        "tags": ["Rice Fields", "Rustic", "Peaceful"],
        "images": ["https://img/1.jpg", "https://img/2.jpg"],
    }
    data.update(overrides)
    return ProjectCreate(**data)


def make_room(**overrides):
    data = {
        "name": "Deluxe",
        "type": "double",
        "price": 800000,
        "amenities": ["WiFi", "Air conditioning"],
        "images": ["https://img/room.jpg"],
    }
    data.update(overrides)
    return RoomCreate(**data)


# pylint: disable-next=redefined-outer-name
def test_project_lists_round_trip(test_db):
    projects = ProjectRepository(test_db)
    created = projects.create(make_project())
    assert created.tags == ["Rice Fields", "Rustic", "Peaceful"]

    by_id = projects.get_by_id(created.id)
    by_slug = projects.get_by_slug("camf")
    assert by_id.tags == ["Rice Fields", "Rustic", "Peaceful"]
    assert by_id.images == ["https://img/1.jpg", "https://img/2.jpg"]
    assert by_slug == by_id


# pylint: disable-next=redefined-outer-name
def test_lists_stored_as_text(test_db):
    created = ProjectRepository(test_db).create(make_project())
    row = test_db.query(Project).filter(Project.id == created.id).first()
    assert isinstance(row.tags, str)


# pylint: disable-next=redefined-outer-name
def test_unset_list_is_absent_in_store_and_empty_on_read(test_db):
    created = ProjectRepository(test_db).create(make_project(tags=None, images=None))
    row = test_db.query(Project).filter(Project.id == created.id).first()
    assert row.tags is None
    assert created.tags == []
    assert created.images == []


# pylint: disable-next=redefined-outer-name
def test_malformed_list_reads_as_empty(test_db):
    rooms = RoomRepository(test_db)
    created = rooms.create(make_room())
    row = test_db.query(Room).filter(Room.id == created.id).first()
    row.amenities = "[broken"
    test_db.commit()

    assert rooms.get_by_id(created.id).amenities == []
    assert rooms.get_by_id(created.id).images == ["https://img/room.jpg"]


# pylint: disable-next=redefined-outer-name
def test_duplicate_slug_rejected_without_mutation(test_db):
    projects = ProjectRepository(test_db)
    projects.create(make_project())
    with pytest.raises(DuplicateError) as excinfo:
        projects.create(make_project(name="Other"))
    assert excinfo.value.field == "slug"
    assert projects.count() == 1
    assert projects.get_by_slug("camf").name == "Camf"


# pylint: disable-next=redefined-outer-name
def test_duplicate_post_slug_rejected(test_db):
    posts = PostRepository(test_db)
    post = PostCreate(title="A", slug="a", content="...", category="Stories")
    posts.create(post)
    with pytest.raises(DuplicateError):
        posts.create(post)
    assert posts.count() == 1


# pylint: disable-next=redefined-outer-name
def test_duplicate_user_email_rejected(test_db):
    users = UserRepository(test_db)
    users.create_account("Admin", "admin@example.com", "hash")
    with pytest.raises(DuplicateError) as excinfo:
        users.create_account("Other", "admin@example.com", "hash")
    assert excinfo.value.field == "email"
    assert users.count() == 1


# pylint: disable-next=redefined-outer-name
def test_partial_update_preserves_untouched_fields(test_db):
    rooms = RoomRepository(test_db)
    created = rooms.create(make_room())
    updated = rooms.update(created.id, RoomPatch(price=900000))
    assert updated.price == 900000
    assert updated.name == created.name
    assert updated.amenities == created.amenities
    assert updated.images == created.images
    assert updated.status == "available"


# pylint: disable-next=redefined-outer-name
def test_update_reserializes_supplied_lists(test_db):
    projects = ProjectRepository(test_db)
    created = projects.create(make_project())
    updated = projects.update(created.id, ProjectPatch(tags=["New"]))
    assert updated.tags == ["New"]
    assert updated.images == created.images


# pylint: disable-next=redefined-outer-name
def test_update_missing_returns_none(test_db):
    assert ServiceRepository(test_db).update(999, ServiceCreate(title="x", description="y")) is None


# pylint: disable-next=redefined-outer-name
def test_delete_twice(test_db):
    services = ServiceRepository(test_db)
    created = services.create(ServiceCreate(title="Renovation", description="Homes"))
    assert services.delete(created.id) is True
    assert services.delete(created.id) is False
    assert services.get_by_id(created.id) is None


# pylint: disable-next=redefined-outer-name
def test_list_is_newest_first(test_db):
    projects = ProjectRepository(test_db)
    first = projects.create(make_project(slug="first"))
    second = projects.create(make_project(slug="second"))
    assert [p.id for p in projects.list()] == [second.id, first.id]


# pylint: disable-next=redefined-outer-name
def test_count(test_db):
    rooms = RoomRepository(test_db)
    assert rooms.count() == 0
    rooms.create(make_room())
    rooms.create(make_room(name="Twin", type="twin"))
    assert rooms.count() == 2


# pylint: disable-next=redefined-outer-name
def test_room_search_filters(test_db):
    rooms = RoomRepository(test_db)
    rooms.create(make_room(name="Cheap", type="single", price=300000))
    rooms.create(make_room(name="Mid", type="double", price=600000, status="occupied"))
    rooms.create(make_room(name="Top", type="suite", price=1500000))

    assert [r.name for r in rooms.search(type="single")] == ["Cheap"]
    assert [r.name for r in rooms.search(status="occupied")] == ["Mid"]
    assert {r.name for r in rooms.search(min_price=500000, max_price=1000000)} == {"Mid"}
    assert len(rooms.search()) == 3


# pylint: disable-next=redefined-outer-name
def test_project_delete_refused_while_rooms_reference_it(test_db):
    projects = ProjectRepository(test_db)
    rooms = RoomRepository(test_db)
    project = projects.create(make_project())
    room = rooms.create(make_room(project_id=project.id))

    with pytest.raises(ConflictError) as excinfo:
        projects.delete(project.id)
    assert excinfo.value.field == "projectId"
    assert projects.get_by_id(project.id) is not None

    rooms.delete(room.id)
    assert projects.delete(project.id) is True


# pylint: disable-next=redefined-outer-name
def test_store_failure_becomes_storage_error(test_db, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(test_db, "query", broken)
    with pytest.raises(StorageError):
        ProjectRepository(test_db).list()


# pylint: disable-next=redefined-outer-name
def test_messages_are_write_once(test_db):
    messages = MessageRepository(test_db)
    created = messages.create(MessageCreate(name="A", email="a@b.com", message="hi"))
    assert messages.get_by_id(created.id).message == "hi"
    assert messages.count() == 1
    assert not hasattr(messages, "update")
    assert not hasattr(messages, "delete")
