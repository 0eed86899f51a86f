"""End-to-end tests for the question endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from study.interface.api.app import create_app
from study.util.di.container import setup_di
from tests.conftest import auth_cookies
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def ask(client, author_id, **overrides):
    payload = {
        "title": "How do I prove a loop invariant?",
        "body": "I understand the idea but not how to write it up formally.",
        "course_code": "csc 201",
        "level": "200",
    }
    payload.update(overrides)
    response = client.post("/questions", json=payload, cookies=auth_cookies(author_id))
    assert response.status_code == 201, response.text
    return response.json()


class TestQuestionEndpoints:
    """End-to-end tests for question API endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_question_requires_auth(self, client):
        response = client.post(
            "/questions",
            json={"title": "Unauthenticated question", "body": "Should not be stored."},
        )

        assert response.status_code == 401

    def test_create_question_with_invalid_token(self, client):
        response = client.post(
            "/questions",
            json={"title": "Unauthenticated question", "body": "Should not be stored."},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_create_and_fetch_question(self, client):
        author_id = uuid4()
        created = ask(client, author_id)

        assert created["course_code"] == "CSC 201"
        assert created["tags"] == ["CSC 201", "200"]
        assert created["upvotes_count"] == 0
        assert created["solved"] is False

        anonymous = client.get(f"/questions/{created['question_id']}")
        assert anonymous.status_code == 200
        assert anonymous.json()["my_vote_state"] is None

        as_author = client.get(
            f"/questions/{created['question_id']}", cookies=auth_cookies(author_id)
        )
        assert as_author.json()["my_vote_state"] is False

    def test_client_cannot_set_counters(self, client):
        created = ask(client, uuid4(), upvotes_count=99, solved=True)

        assert created["upvotes_count"] == 0
        assert created["solved"] is False

    def test_short_title_is_bad_request(self, client):
        response = client.post(
            "/questions",
            json={"title": "Help", "body": "Not enough of a title here."},
            cookies=auth_cookies(uuid4()),
        )

        assert response.status_code == 400

    def test_missing_question_is_not_found(self, client):
        response = client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404

    def test_malformed_question_id_is_unprocessable(self, client):
        response = client.get("/questions/not-a-uuid")

        assert response.status_code == 422

    def test_list_filters_and_has_voted(self, client):
        viewer_id = uuid4()
        csc = ask(client, uuid4())
        ask(client, uuid4(), course_code="MTH 101", level="100")
        client.post(
            f"/questions/{csc['question_id']}/vote/toggle",
            cookies=auth_cookies(viewer_id),
        )

        response = client.get(
            "/questions",
            params={"course_code": "csc 201", "sort": "upvoted"},
            cookies=auth_cookies(viewer_id),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["questions"][0]["question_id"] == csc["question_id"]
        assert body["questions"][0]["has_voted"] is True
        assert body["questions"][0]["upvotes_count"] == 1

    def test_list_rejects_bad_filters(self, client):
        assert client.get("/questions", params={"course_code": "??"}).status_code == 400
        assert client.get("/questions", params={"offset": -1}).status_code == 400
        assert client.get("/questions", params={"sort": "hot"}).status_code == 422
