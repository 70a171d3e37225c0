"""
API tests for genre endpoints.
"""


class TestGenreEndpoints:
    """Tests for /api/genres."""

    def test_create_and_list_genres(self, client):
        for name in ("Thriller", "Action"):
            r = client.post("/api/genres", json={"name": name})
            assert r.status_code == 200
            assert r.json()["name"] == name

        r = client.get("/api/genres")
        assert r.status_code == 200
        assert [g["name"] for g in r.json()] == ["Action", "Thriller"]

    def test_create_genre_name_too_long(self, client):
        r = client.post("/api/genres", json={"name": "x" * 101})
        assert r.status_code == 422

    def test_rename_genre(self, client, genre_id):
        r = client.put(f"/api/genres/{genre_id}", json={"name": "Melodrama"})
        assert r.status_code == 200
        assert r.json() == {"id": genre_id, "name": "Melodrama"}

    def test_rename_missing_genre(self, client):
        r = client.put("/api/genres/200", json={"name": "Noir"})
        assert r.status_code == 404

    def test_delete_genre(self, client, genre_id):
        r = client.delete(f"/api/genres/{genre_id}")
        assert r.status_code == 200
        assert r.json()["id"] == genre_id
        assert client.get("/api/genres").json() == []

    def test_delete_genre_in_use(self, client, genre_id):
        created = client.post(
            "/api/movies",
            data={"title": "Heat", "genreId": str(genre_id)},
            files={"poster": ("poster.jpg", b"\xff\xd8\xff", "image/jpeg")},
        )
        assert created.status_code == 200

        r = client.delete(f"/api/genres/{genre_id}")
        assert r.status_code == 400
        assert r.json()["detail"] == "Genre is used by existing movies."


class TestSystemEndpoints:

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self, client, genre_id):
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["genres"] == 1
        assert data["movies"] == 0
