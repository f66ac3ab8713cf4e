import pytest

EVENT = {
    "id": "evt-1",
    "title": "Standup",
    "description": "",
    "start": "2024-03-15T09:00",
    "end": "2024-03-15T09:15",
    "allDay": False,
    "location": None,
    "color": "#3B82F6",
}


def test_health(api):
    response = api.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_signup_then_signin(api):
    signup = api.post("/api/v1/signup", json={"username": "linus", "password": "penguin"})
    signin = api.post("/api/v1/signin", json={"username": "linus", "password": "penguin"})

    assert signup.json() == {"message": "user signed up successfully"}
    assert signin.status_code == 200
    assert signin.json()["message"] == "user signed in successfully"
    assert signin.json()["token"]


def test_duplicate_signup_conflicts(api):
    api.post("/api/v1/signup", json={"username": "linus", "password": "penguin"})

    response = api.post("/api/v1/signup", json={"username": "linus", "password": "again"})

    assert response.status_code == 409
    assert "message" in response.json()


def test_signin_with_bad_password_is_unauthorized(api):
    api.post("/api/v1/signup", json={"username": "linus", "password": "penguin"})

    response = api.post("/api/v1/signin", json={"username": "linus", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "invalid username or password"}


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer not-a-token"}, {"Authorization": "Token x"}])
def test_event_routes_require_token(api, headers):
    response = api.get("/api/v1/events", headers=headers)

    assert response.status_code == 401
    assert "message" in response.json()


def test_event_lifecycle(api, auth_headers):
    created = api.post("/api/v1/event", json=EVENT, headers=auth_headers)
    assert created.json() == {"message": "Event added successfully"}

    listed = api.get("/api/v1/events", headers=auth_headers).json()["events"]
    assert len(listed) == 1
    assert listed[0]["id"] == "evt-1"
    assert listed[0]["allDay"] is False

    updated = api.put("/api/v1/event/evt-1", json={"title": "Daily standup"}, headers=auth_headers)
    assert updated.json() == {"message": "Event updated successfully"}
    listed = api.get("/api/v1/events", headers=auth_headers).json()["events"]
    assert listed[0]["title"] == "Daily standup"
    assert listed[0]["start"] == "2024-03-15T09:00"

    deleted = api.delete("/api/v1/event/evt-1", headers=auth_headers)
    assert deleted.json() == {"message": "Event deleted successfully"}
    assert api.get("/api/v1/events", headers=auth_headers).json()["events"] == []


def test_events_are_scoped_to_their_owner(api, auth_headers):
    api.post("/api/v1/event", json=EVENT, headers=auth_headers)
    api.post("/api/v1/signup", json={"username": "other", "password": "pw"})
    token = api.post("/api/v1/signin", json={"username": "other", "password": "pw"}).json()["token"]

    response = api.get("/api/v1/events", headers={"Authorization": f"Bearer {token}"})

    assert response.json()["events"] == []


def test_unknown_event_is_not_found(api, auth_headers):
    update = api.put("/api/v1/event/ghost", json={"title": "x"}, headers=auth_headers)
    delete = api.delete("/api/v1/event/ghost", headers=auth_headers)

    assert update.status_code == 404
    assert delete.status_code == 404
    assert delete.json() == {"message": "event ghost not found"}


def test_event_id_is_unique(api, auth_headers):
    first = api.post("/api/v1/event", json=EVENT, headers=auth_headers)
    second = api.post("/api/v1/event", json={**EVENT, "title": "Copy"}, headers=auth_headers)

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json() == {"message": "event evt-1 already exists"}
    listed = api.get("/api/v1/events", headers=auth_headers).json()["events"]
    assert [(event["id"], event["title"]) for event in listed] == [("evt-1", "Standup")]
