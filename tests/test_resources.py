import pytest

from smartcare.errors import NotFound, ServerRejection, Unauthorized
from smartcare.models import Room
from smartcare.resources import RoomHook

HOOK_CASES = [
    ("patients", {'name': 'Kim', 'age': 72, 'room_id': 1}, {'fall_risk': 'high'}, 'fall_risk', 'high'),
    ("guardians", {'name': 'Park', 'tel': '010-1234-5678', 'patient_id': 1}, {'tel': '010-0000-0000'}, 'tel', '010-0000-0000'),
    ("accidents", {'patient_id': 1, 'room_id': 1}, {'notified': True}, 'notified', True),
    ("cameras", {'name': 'CAM-101', 'room_id': 1}, {'active': False}, 'active', False),
    ("messages", {'sender_id': 1, 'receiver_id': 2, 'message': 'hello'}, {'read': True}, 'read', True),
    ("rooms", {'name': '101'}, {'temp_threshold': 24.5}, 'temp_threshold', 24.5),
    ("env_logs", {'room_id': 1, 'temperature': 23.0, 'humidity': 40.0}, {'alert': True}, 'alert', True),
]


@pytest.mark.parametrize("hook_name, data, patch, field, expected", HOOK_CASES)
def test_create_appends_server_entity(nurse_client, hook_name, data, patch, field, expected):
    hook = getattr(nurse_client, hook_name)
    before = hook.items()

    created = hook.create(data)

    after = hook.items()
    assert len(after) == len(before) + 1
    assert after[-1] == created
    assert created.id is not None


@pytest.mark.parametrize("hook_name, data, patch, field, expected", HOOK_CASES)
def test_update_replaces_by_id(nurse_client, hook_name, data, patch, field, expected):
    hook = getattr(nurse_client, hook_name)
    created = hook.create(data)

    hook.update(created.id, patch)

    matching = [item for item in hook.items() if item.id == created.id]
    assert len(matching) == 1
    assert getattr(matching[0], field) == expected


@pytest.mark.parametrize("hook_name, data, patch, field, expected", HOOK_CASES)
def test_delete_filters_by_id(nurse_client, hook_name, data, patch, field, expected):
    hook = getattr(nurse_client, hook_name)
    created = hook.create(data)

    hook.delete(created.id)

    assert all(item.id != created.id for item in hook.items())


def test_second_delete_fails_and_leaves_cache(nurse_client):
    keep = nurse_client.patients.create({'name': 'Lee', 'age': 80})
    gone = nurse_client.patients.create({'name': 'Kim', 'age': 72})
    nurse_client.patients.delete(gone.id)
    cached = nurse_client.patients.items()

    with pytest.raises(NotFound):
        nurse_client.patients.delete(gone.id)

    assert nurse_client.patients.items() == cached == [keep]


def test_each_mutation_emits_exactly_one_notification(nurse_client):
    nurse_client.notifier.drain()

    camera = nurse_client.cameras.create({'name': 'CAM-1', 'room_id': 1})
    assert len(nurse_client.notifier.drain()) == 1

    nurse_client.cameras.update(camera.id, {'name': 'CAM-2'})
    [notification] = nurse_client.notifier.drain()
    assert not notification.is_error
    assert "CAM-2" in notification.description

    with pytest.raises(NotFound):
        nurse_client.cameras.update(999, {'name': 'CAM-3'})
    [notification] = nurse_client.notifier.drain()
    assert notification.is_error


def test_failed_create_keeps_cache_and_reports_server_message(nurse_client):
    nurse_client.patients.create({'name': 'Kim', 'age': 72})
    cached = nurse_client.patients.items()
    nurse_client.notifier.drain()

    with pytest.raises(ServerRejection):
        nurse_client.patients.create({'age': 72})

    assert nurse_client.patients.items() == cached
    [notification] = nurse_client.notifier.drain()
    assert notification.is_error
    assert notification.description == "name is required"


def test_list_reads_from_cache_until_refetch(nurse_client, backend):
    backend.seed('patients', name='Seeded', age=60)
    assert [p.name for p in nurse_client.patients.items()] == ['Seeded']

    backend.seed('patients', name='Later', age=61)
    assert len(nurse_client.patients.items()) == 1

    assert len(nurse_client.patients.refetch().data) == 2


def test_list_reports_errors_without_caching(nurse_client, backend):
    backend.force("GET", "/api/rooms", 500, "database offline")

    result = nurse_client.rooms.list()

    assert result.data is None
    assert result.error.message == "database offline"
    assert not nurse_client.cache.has(nurse_client.rooms.resource)


def test_unauthorized_mutation_redirects_from_any_hook(nurse_client, backend):
    nurse_client.router.navigate("/room-management")
    backend.session_user = None

    with pytest.raises(Unauthorized):
        nurse_client.guardians.create({'name': 'Park', 'tel': '010'})

    assert nurse_client.router.location == "/auth"
    assert nurse_client.user is None


def test_resolve_accident(nurse_client):
    accident = nurse_client.accidents.create({'patient_id': 1, 'room_id': 1})
    assert nurse_client.accidents.unresolved() == [accident]

    resolved = nurse_client.accidents.resolve(accident.id, resolved_by=1)

    assert resolved.resolved and resolved.resolved_by == 1
    assert nurse_client.accidents.unresolved() == []


def test_message_conversation_and_read_state(nurse_client):
    hooks = nurse_client.messages
    first = hooks.create({'sender_id': 2, 'receiver_id': 1, 'message': 'hi'})
    hooks.create({'sender_id': 1, 'receiver_id': 2, 'message': 'hello'})
    hooks.create({'sender_id': 3, 'receiver_id': 1, 'message': 'other thread'})

    assert [m.message for m in hooks.conversation(1, 2)] == ['hi', 'hello']
    assert len(hooks.unread_for(1)) == 2

    hooks.mark_read(first.id)
    assert [m.message for m in hooks.unread_for(1)] == ['other thread']


def test_patients_in_room_and_guardians_for_patient(nurse_client):
    kim = nurse_client.patients.create({'name': 'Kim', 'age': 72, 'room_id': 5})
    nurse_client.patients.create({'name': 'Lee', 'age': 80, 'room_id': 6})
    nurse_client.guardians.create({'name': 'Park', 'tel': '010', 'patient_id': kim.id})

    assert [p.name for p in nurse_client.patients.in_room(5)] == ['Kim']
    assert [g.name for g in nurse_client.guardians.for_patient(kim.id)] == ['Park']


def test_latest_env_log_for_room(nurse_client, backend):
    backend.seed('env-logs', roomId=1, temperature=22.0, timestamp='2025-05-01T10:00:00')
    backend.seed('env-logs', roomId=1, temperature=27.5, timestamp='2025-05-01T11:00:00')
    backend.seed('env-logs', roomId=2, temperature=20.0, timestamp='2025-05-01T12:00:00')

    latest = nurse_client.env_logs.latest_for_room(1)

    assert latest.temperature == 27.5
    assert nurse_client.env_logs.latest_for_room(9) is None


def make_room(**readings):
    return Room(id=1, name="101", **readings)


def test_room_threshold_check():
    assert RoomHook.is_out_of_range(make_room(current_temp=27.0))
    assert RoomHook.is_out_of_range(make_room(current_humidity=65.0))
    assert not RoomHook.is_out_of_range(make_room(current_temp=25.0, current_humidity=50.0))
    assert not RoomHook.is_out_of_range(make_room())


def test_users_by_role(nurse_client):
    assert [u.username for u in nurse_client.users.by_role('director')] == ['boss']


def test_unreadable_success_body_is_reported_once(nurse_client, backend):
    cached = nurse_client.cameras.items()
    nurse_client.notifier.drain()
    backend.force("POST", "/api/cameras", 201)

    with pytest.raises(ValueError):
        nurse_client.cameras.create({'name': 'CAM-9', 'room_id': 1})

    [notification] = nurse_client.notifier.drain()
    assert notification.is_error
    assert nurse_client.cameras.items() == cached
