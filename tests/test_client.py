from datetime import date

import pytest

from calgrid.data import EventStoreClient, EventStoreError, NotSignedInError
from calgrid.domain import EventDraft
from calgrid.services import CalendarService, CalendarState, CalendarSync


@pytest.fixture
def client(api):
    return EventStoreClient(base_url="http://testserver", http=api)


@pytest.fixture
def signed_in(client):
    client.sign_up("margaret", "apollo")
    client.sign_in("margaret", "apollo")
    return client


@pytest.fixture
def sync(signed_in, today):
    calendar = CalendarService(CalendarState(anchor=today), track_pending=True, today=lambda: today)
    return CalendarSync(calendar=calendar, client=signed_in)


def test_sign_in_stores_token(client):
    assert client.sign_up("margaret", "apollo") == "user signed up successfully"

    token = client.sign_in("margaret", "apollo")

    assert client.is_signed_in
    assert client.token == token


def test_failed_sign_in_carries_server_message(client):
    with pytest.raises(EventStoreError) as caught:
        client.sign_in("margaret", "wrong")

    assert caught.value.status_code == 401
    assert caught.value.detail == "invalid username or password"
    assert not client.is_signed_in


def test_event_requests_need_sign_in(client):
    with pytest.raises(NotSignedInError):
        client.list_events()


def test_pushed_changes_reach_the_server(sync, today):
    calendar = sync.calendar
    created = calendar.create_event(EventDraft(title="Launch", date=today, start_time="13:00", end_time="14:00"))

    assert sync.push(created.change)
    assert calendar.pending == {}

    updated = calendar.update_event(created.event.id, EventDraft(title="Launch review", date=date(2024, 3, 18)))
    assert sync.push(updated.change)

    remote = sync.fetch()
    assert len(remote) == 1
    assert remote[0].id == created.event.id
    assert remote[0].title == "Launch review"
    assert remote[0].date == date(2024, 3, 18)

    deleted = calendar.delete_event(created.event.id)
    assert sync.push(deleted.change)
    assert sync.fetch() == []


def test_rejected_change_is_rolled_back(sync, today, make_event):
    calendar = sync.calendar
    local = make_event(today, title="Local only")
    calendar.load([local])

    result = calendar.delete_event(local.id)

    assert not sync.push(result.change)
    assert calendar.find(local.id) == local
    assert calendar.pending == {}


def test_sign_out_clears_token(signed_in):
    signed_in.sign_out()

    assert not signed_in.is_signed_in


def test_close_releases_owned_http_client():
    owned = EventStoreClient(base_url="http://calendar.invalid")

    owned.close()

    assert owned.http.is_closed


def test_close_leaves_injected_http_client_open(client, api):
    client.close()

    assert api.get("/api/v1/health").status_code == 200
