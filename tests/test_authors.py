"""
Tests for Authors API Endpoints

Tests for /api/v1/authors endpoints.
"""

import uuid

from fastapi import status

MISSING_ID = "00000000-0000-4000-8000-000000000000"


class TestListAuthors:
    """Tests for GET /api/v1/authors/ endpoint."""

    def test_list_authors_empty(self, client):
        """Test listing authors when database is empty."""
        response = client.get("/api/v1/authors/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["items"] == []
        assert data["meta"] == {"total": 0, "page": 0, "limit": 10, "totalPages": 0}

    def test_list_authors_includes_books(self, client, sample_book):
        """Each author in the list carries its books."""
        response = client.get("/api/v1/authors/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["items"]) == 1
        author = data["items"][0]
        assert author["firstName"] == "Stephen"
        assert author["lastName"] == "King"
        assert [b["title"] for b in author["books"]] == ["The Shining"]

    def test_list_authors_pagination(self, client, multiple_authors):
        """page=2, limit=5 over 12 authors leaves 2 on the last page."""
        response = client.get("/api/v1/authors/?page=2&limit=5")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["items"]) == 2
        assert data["meta"] == {"total": 12, "page": 2, "limit": 5, "totalPages": 3}

    def test_list_authors_sorted_by_last_name(self, client, multiple_authors):
        response = client.get("/api/v1/authors/?limit=3")

        names = [a["lastName"] for a in response.json()["items"]]
        assert names == ["Last00", "Last01", "Last02"]

    def test_list_authors_invalid_pagination(self, client):
        """Out-of-range page/limit values are rejected with 400."""
        assert client.get("/api/v1/authors/?page=-1").status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/v1/authors/?limit=0").status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/v1/authors/?limit=101").status_code == status.HTTP_400_BAD_REQUEST

    def test_list_authors_page_too_large(self, client):
        """A page whose offset overflows a 64-bit integer is a 400, not a 500."""
        response = client.get("/api/v1/authors/?page=10000000000000000000&limit=10")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetAuthor:
    """Tests for GET /api/v1/authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_book, sample_author):
        """Test getting an author by ID."""
        response = client.get(f"/api/v1/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == str(sample_author.id)
        assert data["firstName"] == "Stephen"
        assert "createdAt" in data
        assert "updatedAt" in data
        assert len(data["books"]) == 1
        assert data["books"][0]["pageCount"] == 447

    def test_get_author_not_found(self, client):
        """Test getting a non-existent author returns 404."""
        response = client.get(f"/api/v1/authors/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()

    def test_get_author_bad_id_format(self, client):
        """A malformed UUID is a 400, not a 404."""
        response = client.get("/api/v1/authors/not-a-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetAuthorBooks:
    """Tests for GET /api/v1/authors/{author_id}/books endpoint."""

    def test_get_author_books_paginated(self, client, sample_author, multiple_books):
        response = client.get(f"/api/v1/authors/{sample_author.id}/books?page=1&limit=5")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["items"]) == 5
        assert data["meta"]["total"] == 12
        assert data["meta"]["totalPages"] == 3
        # Ordered by release date, so page 1 starts at the sixth book
        assert data["items"][0]["title"] == "Test Book 6"
        assert data["items"][0]["author"]["id"] == str(sample_author.id)

    def test_get_author_books_empty(self, client, sample_author):
        response = client.get(f"/api/v1/authors/{sample_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["items"] == []

    def test_get_author_books_author_not_found(self, client):
        response = client.get(f"/api/v1/authors/{MISSING_ID}/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreateAuthor:
    """Tests for POST /api/v1/authors/ endpoint."""

    def test_create_author(self, client):
        """The created author has a generated id and no books."""
        author_data = {"firstName": "John", "lastName": "Doe"}

        response = client.post("/api/v1/authors/", json=author_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert uuid.UUID(data["id"])
        assert data["firstName"] == "John"
        assert data["lastName"] == "Doe"
        assert data["books"] == []
        assert data["createdAt"] is not None

    def test_create_author_accepts_snake_case(self, client):
        response = client.post(
            "/api/v1/authors/",
            json={"first_name": "Jane", "last_name": "Austen"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["lastName"] == "Austen"

    def test_create_author_strips_whitespace(self, client):
        response = client.post(
            "/api/v1/authors/",
            json={"firstName": "  Jane ", "lastName": "Austen"},
        )

        assert response.json()["firstName"] == "Jane"

    def test_create_author_missing_field(self, client):
        """lastName is required."""
        response = client.post("/api/v1/authors/", json={"firstName": "John"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_author_empty_name(self, client):
        """Test that a whitespace-only name is rejected."""
        response = client.post(
            "/api/v1/authors/",
            json={"firstName": "   ", "lastName": "Doe"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateAuthor:
    """Tests for PUT /api/v1/authors/{author_id} endpoint."""

    def test_update_author_partial(self, client, sample_author):
        """Only the supplied field changes."""
        response = client.put(
            f"/api/v1/authors/{sample_author.id}",
            json={"firstName": "Richard"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["firstName"] == "Richard"
        assert data["lastName"] == "King"

    def test_update_author_empty_body(self, client, sample_author):
        """An empty patch leaves the author as it was."""
        response = client.put(f"/api/v1/authors/{sample_author.id}", json={})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["firstName"] == "Stephen"
        assert data["lastName"] == "King"

    def test_update_author_keeps_books(self, client, sample_book, sample_author):
        response = client.put(
            f"/api/v1/authors/{sample_author.id}",
            json={"lastName": "Bachman"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["books"]) == 1

    def test_update_author_null_rejected(self, client, sample_author):
        response = client.put(
            f"/api/v1/authors/{sample_author.id}",
            json={"firstName": None},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_not_found(self, client):
        """Test updating a non-existent author returns 404."""
        response = client.put(
            f"/api/v1/authors/{MISSING_ID}",
            json={"firstName": "Updated"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteAuthor:
    """Tests for DELETE /api/v1/authors/{author_id} endpoint."""

    def test_delete_author_success(self, client, sample_author):
        """Test deleting an author successfully."""
        response = client.delete(f"/api/v1/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        get_response = client.get(f"/api/v1/authors/{sample_author.id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_with_books_conflict(self, client, sample_book, sample_author):
        """Authors with books cannot be deleted."""
        response = client.delete(f"/api/v1/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_409_CONFLICT

        get_response = client.get(f"/api/v1/authors/{sample_author.id}")
        assert get_response.status_code == status.HTTP_200_OK

    def test_delete_author_not_found(self, client):
        """Test deleting a non-existent author returns 404."""
        response = client.delete(f"/api/v1/authors/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_bad_id_format(self, client):
        response = client.delete("/api/v1/authors/12345")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
