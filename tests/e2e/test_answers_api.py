"""End-to-end tests for answering and accepting."""

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


@pytest.fixture
def author_id():
    return uuid4()


@pytest.fixture
def question(client, author_id):
    response = client.post(
        "/questions",
        json={
            "title": "Why is quicksort faster than mergesort in practice?",
            "body": "Both are n log n on average, so where does the gap come from?",
        },
        cookies=auth_cookies(author_id),
    )
    assert response.status_code == 201, response.text
    return response.json()


def answer(client, question_id, body="Cache locality of in-place partitioning."):
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"body": body},
        cookies=auth_cookies(uuid4(), "helper@student.example.edu"),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestAnswerEndpoints:
    """End-to-end tests for answer API endpoints."""

    def test_posting_answer_increments_count(self, client, question):
        posted = answer(client, question["question_id"])

        assert posted["is_accepted"] is False
        assert posted["author_email"] == "helper@student.example.edu"
        fetched = client.get(f"/questions/{question['question_id']}").json()
        assert fetched["answers_count"] == 1

    def test_answering_requires_auth(self, client, question):
        response = client.post(
            f"/questions/{question['question_id']}/answers",
            json={"body": "Anonymous answers are not allowed."},
        )

        assert response.status_code == 401

    def test_answering_missing_question(self, client):
        response = client.post(
            f"/questions/{uuid4()}/answers",
            json={"body": "There is no question to answer here."},
            cookies=auth_cookies(uuid4()),
        )

        assert response.status_code == 404

    def test_scenario_b_acceptance_moves(self, client, question, author_id):
        question_id = question["question_id"]
        a1 = answer(client, question_id, "Fewer swaps on typical inputs.")
        a2 = answer(client, question_id, "Cache locality of in-place partitioning.")

        first = client.post(
            f"/questions/{question_id}/answers/{a1['answer_id']}/accept",
            cookies=auth_cookies(author_id),
        )
        assert first.status_code == 200
        assert first.json()["solved"] is True

        second = client.post(
            f"/questions/{question_id}/answers/{a2['answer_id']}/accept",
            cookies=auth_cookies(author_id),
        )
        assert second.status_code == 200
        assert second.json()["solved"] is True

        answers = client.get(f"/questions/{question_id}/answers").json()["answers"]
        assert [a["answer_id"] for a in answers] == [a2["answer_id"], a1["answer_id"]]
        assert [a["is_accepted"] for a in answers] == [True, False]

    def test_scenario_c_non_author_is_forbidden(self, client, question):
        question_id = question["question_id"]
        a1 = answer(client, question_id)

        response = client.post(
            f"/questions/{question_id}/answers/{a1['answer_id']}/accept",
            cookies=auth_cookies(uuid4()),
        )

        assert response.status_code == 403
        answers = client.get(f"/questions/{question_id}/answers").json()["answers"]
        assert answers[0]["is_accepted"] is False
        assert client.get(f"/questions/{question_id}").json()["solved"] is False

    def test_accept_unknown_answer(self, client, question, author_id):
        response = client.post(
            f"/questions/{question['question_id']}/answers/{uuid4()}/accept",
            cookies=auth_cookies(author_id),
        )

        assert response.status_code == 404

    def test_accept_requires_auth(self, client, question):
        a1 = answer(client, question["question_id"])

        response = client.post(
            f"/questions/{question['question_id']}/answers/{a1['answer_id']}/accept"
        )

        assert response.status_code == 401
