from fastapi import status
from homestay.models.message import Message
from tests.conf_tests import client, clear_db, test_db, test_user_data, test_user, logged_in


def test_submit_contact_message(test_db):
    response = client.post(
        "/api/contact", json={"name": "A", "email": "a@b.com", "message": "hi"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["createdAt"]
    assert data["message"] == "hi"
    assert test_db.query(Message).count() == 1


def test_submit_contact_missing_message(test_db):
    response = client.post("/api/contact", json={"name": "A", "email": "a@b.com"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "message"
    assert test_db.query(Message).count() == 0


def test_submit_contact_invalid_email():
    response = client.post(
        "/api/contact", json={"name": "A", "email": "not-an-email", "message": "hi"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "email"


def test_list_messages_requires_login():
    response = client.get("/api/admin/messages")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


# pylint: disable-next=redefined-outer-name
def test_list_messages_newest_first(logged_in):
    client.post("/api/contact", json={"name": "A", "email": "a@b.com", "message": "first"})
    client.post("/api/contact", json={"name": "B", "email": "b@b.com", "message": "second"})
    response = client.get("/api/admin/messages")
    assert response.status_code == status.HTTP_200_OK
    assert [m["message"] for m in response.json()] == ["second", "first"]


def test_submit_contact_malformed_json(test_db):
    response = client.post(
        "/api/contact", content="{bad", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Request body is not valid JSON", "field": None}
    assert test_db.query(Message).count() == 0
