"""
Tests for Reading Sessions Endpoints

POST /api/books/{id}/sessions and GET /api/books/{id}/sessions.
Sessions are only reachable through a book the caller owns.
"""

import pytest
from fastapi import status
from sqlalchemy.orm import Session

from clookbook.models import ReadingSession
from clookbook.models.user import User
from clookbook.services.security import create_access_token


def get_auth_headers(user: User) -> dict:
    """Generate auth headers for a user."""
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


class TestCreateSession:
    """Tests for POST /api/books/{id}/sessions"""

    def test_create_session_success(self, client, sample_book, sample_user):
        response = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json={"startPage": 10, "currentPage": 42, "elapsedMs": 1_800_000},
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["bookId"] == sample_book.id
        assert data["startPage"] == 10
        assert data["currentPage"] == 42
        assert data["elapsedMs"] == 1_800_000
        assert "id" in data
        assert "createdAt" in data

    def test_create_session_all_fields_optional(self, client, sample_book, sample_user):
        response = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json={},
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["startPage"] is None
        assert data["currentPage"] is None
        assert data["elapsedMs"] is None

    def test_create_session_becomes_last_session(self, client, sample_book, sample_user, sample_sessions):
        headers = get_auth_headers(sample_user)
        created = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json={"startPage": 45, "currentPage": 60, "elapsedMs": 600_000},
            headers=headers,
        ).json()

        response = client.get(f"/api/books/{sample_book.id}", headers=headers)

        assert response.json()["lastSession"]["id"] == created["id"]

    @pytest.mark.parametrize(
        "body",
        [{"startPage": -1}, {"currentPage": -10}, {"elapsedMs": -500}],
    )
    def test_create_session_negative_values(self, client, sample_book, sample_user, body):
        response = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json=body,
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert isinstance(response.json()["detail"], str)

    @pytest.mark.parametrize(
        "body",
        [
            {"startPage": 10**20},
            {"currentPage": 2_147_483_648},
            {"elapsedMs": 2**63},
        ],
    )
    def test_create_session_values_too_large(
        self, client, db_session: Session, sample_book, sample_user, body
    ):
        response = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json=body,
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert isinstance(response.json()["detail"], str)
        assert db_session.query(ReadingSession).count() == 0

    def test_create_session_long_elapsed_time(self, client, sample_book, sample_user):
        response = client.post(
            f"/api/books/{sample_book.id}/sessions",
            json={"elapsedMs": 2**40},
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["elapsedMs"] == 2**40

    def test_create_session_other_users_book(
        self, client, db_session: Session, other_users_book, sample_user
    ):
        response = client.post(
            f"/api/books/{other_users_book.id}/sessions",
            json={"startPage": 1},
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book not found"
        assert db_session.query(ReadingSession).count() == 0

    def test_create_session_unauthenticated(self, client, sample_book):
        response = client.post(f"/api/books/{sample_book.id}/sessions", json={})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListSessions:
    """Tests for GET /api/books/{id}/sessions"""

    def test_list_sessions_empty(self, client, sample_book, sample_user):
        response = client.get(
            f"/api/books/{sample_book.id}/sessions",
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_sessions_newest_first(self, client, sample_book, sample_user, sample_sessions):
        response = client.get(
            f"/api/books/{sample_book.id}/sessions",
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_200_OK
        ids = [s["id"] for s in response.json()]
        assert ids == [sample_sessions[1].id, sample_sessions[0].id]

    def test_list_sessions_other_users_book(self, client, other_users_book, sample_user):
        response = client.get(
            f"/api/books/{other_users_book.id}/sessions",
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book not found"

    def test_list_sessions_book_not_found(self, client, sample_user):
        response = client.get(
            "/api/books/99999/sessions",
            headers=get_auth_headers(sample_user),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
