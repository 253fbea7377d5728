import pytest
from fastapi import status
from homestay.models.post import Post
from homestay.models.service import Service
from tests.conf_tests import client, clear_db, test_db, test_user_data, test_user, logged_in

TEST_POST_DATA = {
    "title": "Awakening the Soul of a Home",
    "slug": "awakening-soul",
    "content": "Every house has a soul waiting to be awakened.",
    "category": "Operating Stories",
    "author": "INN Team",
    "imageUrl": "https://img/soul.jpg",
}


@pytest.fixture
def test_post(test_db):
    post = Post(title="The Story of Tuoi", slug="story-of-tuoi", content="...", category="People & Stories")
    test_db.add(post)
    test_db.commit()
    test_db.refresh(post)
    return post


@pytest.fixture
def test_service(test_db):
    service = Service(title="Renovation", description="Soulful homes", icon="hammer")
    test_db.add(service)
    test_db.commit()
    test_db.refresh(service)
    return service


# pylint: disable-next=redefined-outer-name
def test_public_post_reads(test_post):
    assert client.get("/api/posts").json()[0]["slug"] == "story-of-tuoi"
    assert client.get("/api/posts/story-of-tuoi").json()["id"] == test_post.id
    response = client.get(f"/api/posts/id/{test_post.id}")
    assert response.status_code == status.HTTP_200_OK
    assert "publishedAt" in response.json()


def test_post_not_found():
    assert client.get("/api/posts/nope").status_code == status.HTTP_404_NOT_FOUND
    response = client.get("/api/posts/id/42")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Post with ID 42 not found"


# pylint: disable-next=redefined-outer-name
def test_create_post(logged_in):
    response = client.post("/api/admin/posts", json=TEST_POST_DATA)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["imageUrl"] == "https://img/soul.jpg"


# pylint: disable-next=redefined-outer-name
def test_create_post_duplicate_slug(logged_in, test_db):
    client.post("/api/admin/posts", json=TEST_POST_DATA)
    response = client.post("/api/admin/posts", json={**TEST_POST_DATA, "title": "Again"})
    assert response.status_code == status.HTTP_409_CONFLICT
    assert test_db.query(Post).count() == 1


# pylint: disable-next=redefined-outer-name
def test_update_post_to_taken_slug(logged_in, test_post, test_db):
    other = client.post("/api/admin/posts", json=TEST_POST_DATA).json()
    response = client.put(f"/api/admin/posts/{test_post.id}", json={"slug": other["slug"]})
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["field"] == "slug"

    test_db.expire_all()
    stored = test_db.query(Post).filter(Post.id == test_post.id).first()
    assert stored.slug == "story-of-tuoi"


# pylint: disable-next=redefined-outer-name
def test_update_and_delete_post(logged_in, test_post):
    response = client.put(f"/api/admin/posts/{test_post.id}", json={"author": "Founder"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["author"] == "Founder"
    assert response.json()["title"] == "The Story of Tuoi"

    assert client.delete(f"/api/admin/posts/{test_post.id}").status_code == status.HTTP_200_OK
    assert client.delete(f"/api/admin/posts/{test_post.id}").status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_post_mutations_unauthorized(test_post, test_db):
    assert client.put(f"/api/admin/posts/{test_post.id}", json={"title": "x"}).status_code == 401
    assert client.delete(f"/api/admin/posts/{test_post.id}").status_code == 401
    assert test_db.query(Post).count() == 1


# pylint: disable-next=redefined-outer-name
def test_list_services(test_service):
    response = client.get("/api/services")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [
        {"id": test_service.id, "title": "Renovation", "description": "Soulful homes", "icon": "hammer"}
    ]


# pylint: disable-next=redefined-outer-name
def test_service_crud(logged_in):
    response = client.post(
        "/api/admin/services", json={"title": "Consulting", "description": "Pricing advice"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    service_id = response.json()["id"]

    response = client.put(f"/api/admin/services/{service_id}", json={"icon": "briefcase"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["title"] == "Consulting"
    assert response.json()["icon"] == "briefcase"

    assert len(client.get("/api/admin/services").json()) == 1
    assert client.delete(f"/api/admin/services/{service_id}").json()["success"] is True


# pylint: disable-next=redefined-outer-name
def test_service_invalid_id(logged_in):
    response = client.delete("/api/admin/services/1x")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid service ID. ID must be a number."


# pylint: disable-next=redefined-outer-name
def test_create_service_missing_description(logged_in, test_db):
    response = client.post("/api/admin/services", json={"title": "Consulting"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "description"
    assert test_db.query(Service).count() == 0
