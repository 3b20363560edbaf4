"""Client-side record types mirroring the backend's JSON payloads."""
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple


class UserRole:
    DIRECTOR = "director"
    NURSE = "nurse"
    PATIENT = "patient"
    GUARDIAN = "guardian"

    ALL = (DIRECTOR, NURSE, PATIENT, GUARDIAN)
    STAFF = (DIRECTOR, NURSE)


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


@dataclass
class Record:
    """Base for records exchanged with the API (camelCase on the wire)"""
    id: int

    datetime_fields: ClassVar[Tuple[str, ...]] = ()
    label_field: ClassVar[Optional[str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        values = {}
        for f in fields(cls):
            for key in (_camel(f.name), f.name):
                if key in data:
                    value = data[key]
                    if f.name in cls.datetime_fields:
                        value = _parse_datetime(value)
                    values[f.name] = value
                    break
        return cls(**values)

    def to_payload(self) -> Dict[str, Any]:
        payload = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            payload[_camel(f.name)] = value
        return payload

    @property
    def label(self) -> str:
        if self.label_field:
            return str(getattr(self, self.label_field) or '')
        return f"#{self.id}"


@dataclass
class User(Record):
    username: str = ''
    name: str = ''
    role: str = UserRole.PATIENT
    email: str = ''
    preferred_language: Optional[str] = 'ko'
    fcm_token: Optional[str] = None
    created_at: Optional[datetime] = None

    datetime_fields: ClassVar[Tuple[str, ...]] = ('created_at',)
    label_field: ClassVar[Optional[str]] = 'name'

    @property
    def is_staff(self) -> bool:
        return self.role in UserRole.STAFF


@dataclass
class Room(Record):
    name: str = ''
    temp_threshold: Optional[float] = 26.0
    humidity_threshold: Optional[float] = 60.0
    layout: Optional[str] = None
    current_temp: Optional[float] = None
    current_humidity: Optional[float] = None
    status: Optional[str] = 'normal'

    label_field: ClassVar[Optional[str]] = 'name'


@dataclass
class Patient(Record):
    name: str = ''
    age: int = 0
    user_id: Optional[int] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    blood: Optional[str] = None
    room_id: Optional[int] = None
    bed_number: Optional[int] = None
    fall_risk: Optional[str] = 'low'
    assigned_nurse_id: Optional[int] = None

    label_field: ClassVar[Optional[str]] = 'name'


@dataclass
class Guardian(Record):
    name: str = ''
    tel: str = ''
    user_id: Optional[int] = None
    patient_id: Optional[int] = None

    label_field: ClassVar[Optional[str]] = 'name'


@dataclass
class Accident(Record):
    patient_id: Optional[int] = None
    room_id: Optional[int] = None
    date: Optional[datetime] = None
    notified: bool = False
    resolved: bool = False
    resolved_by: Optional[int] = None

    datetime_fields: ClassVar[Tuple[str, ...]] = ('date',)


@dataclass
class EnvLog(Record):
    room_id: Optional[int] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    timestamp: Optional[datetime] = None
    alert: bool = False

    datetime_fields: ClassVar[Tuple[str, ...]] = ('timestamp',)


@dataclass
class Camera(Record):
    name: str = ''
    room_id: Optional[int] = None
    stream_url: Optional[str] = None
    active: bool = True

    label_field: ClassVar[Optional[str]] = 'name'


@dataclass
class Message(Record):
    message: str = ''
    sender_id: Optional[int] = None
    receiver_id: Optional[int] = None
    timestamp: Optional[datetime] = None
    read: bool = False

    datetime_fields: ClassVar[Tuple[str, ...]] = ('timestamp',)


def to_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a snake_case form dict into the API's camelCase body"""
    return {_camel(key): value for key, value in data.items()}
