from sqlalchemy.exc import SQLAlchemyError

from ranking_api.core import get_session


def test_create_user_starts_at_zero(client):
    response = client.post("/api/users", json={"name": "Zara"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Zara"
    assert body["totalPoints"] == 0
    assert body["id"]

    listed = {user["name"]: user for user in client.get("/api/users").json()}
    assert listed["Zara"]["totalPoints"] == 0
    assert listed["Zara"]["id"] == body["id"]


def test_duplicate_name_conflicts(client):
    assert client.post("/api/users", json={"name": "Zara"}).status_code == 201

    response = client.post("/api/users", json={"name": "Zara"})
    assert response.status_code == 409
    assert response.json() == {"message": "Error: This user name already exists."}


def test_names_are_case_sensitive(client):
    assert client.post("/api/users", json={"name": "zara"}).status_code == 201
    assert client.post("/api/users", json={"name": "Zara"}).status_code == 201


def test_seed_name_conflicts(client):
    response = client.post("/api/users", json={"name": "Rahul"})
    assert response.status_code == 409


def test_missing_name_is_bad_request(client):
    response = client.post("/api/users", json={})
    assert response.status_code == 400
    assert response.json() == {"message": "Name is required"}


def test_blank_name_is_bad_request(client):
    assert client.post("/api/users", json={"name": "   "}).status_code == 400
    assert client.post("/api/users", json={"name": ""}).status_code == 400


def test_non_string_name_is_bad_request(client):
    assert client.post("/api/users", json={"name": 42}).status_code == 400


def test_missing_body_is_bad_request(client):
    assert client.post("/api/users").status_code == 400


def test_malformed_body_is_bad_request(client):
    response = client.post(
        "/api/users", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body"}


def test_list_users_returns_every_user(client):
    users = client.get("/api/users").json()
    assert len(users) == 10
    assert all(set(user) >= {"id", "name", "totalPoints"} for user in users)


class _BrokenSession:
    def exec(self, *args, **kwargs):
        raise SQLAlchemyError("database is down")

    def add(self, *args, **kwargs):
        pass

    def commit(self):
        raise SQLAlchemyError("database is down")

    def rollback(self):
        pass


def _broken_session():
    yield _BrokenSession()


def test_list_users_storage_failure(app, client):
    app.dependency_overrides[get_session] = _broken_session
    try:
        response = client.get("/api/users")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Error fetching users"}


def test_create_user_storage_failure(app, client):
    app.dependency_overrides[get_session] = _broken_session
    try:
        response = client.post("/api/users", json={"name": "Zara"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Error adding user"}
