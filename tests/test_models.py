from datetime import datetime, timezone

from smartcare.models import Accident, Patient, User, UserRole, to_payload


def test_from_dict_reads_camel_case_and_defaults():
    patient = Patient.from_dict({
        'id': 3,
        'name': 'Kim',
        'age': 72,
        'roomId': 101,
        'assignedNurseId': 1,
        'somethingNew': 'ignored',
    })

    assert patient.room_id == 101
    assert patient.assigned_nurse_id == 1
    assert patient.fall_risk == 'low'


def test_timestamps_are_parsed():
    accident = Accident.from_dict({'id': 1, 'date': '2025-03-01T08:30:00.000Z'})

    assert accident.date == datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)
    assert accident.to_payload()['date'].startswith('2025-03-01T08:30:00')


def test_user_roles_and_label():
    nurse = User.from_dict({'id': 1, 'username': 'a', 'role': 'nurse', 'name': 'A'})

    assert nurse.is_staff
    assert nurse.label == 'A'
    assert nurse.preferred_language == 'ko'
    assert UserRole.PATIENT not in UserRole.STAFF


def test_form_data_is_sent_camel_case():
    assert to_payload({'room_id': 1, 'stream_url': None, 'name': 'CAM'}) == {
        'roomId': 1, 'streamUrl': None, 'name': 'CAM',
    }
