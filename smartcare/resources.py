"""Resource hooks: cached reads plus create/update/delete with cache patches."""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from smartcare import cache
from smartcare.cache import QueryCache, Resource
from smartcare.errors import ApiError
from smartcare.i18n import translate
from smartcare.models import (
    Accident,
    Camera,
    EnvLog,
    Guardian,
    Message,
    Patient,
    Record,
    Room,
    User,
    to_payload,
)
from smartcare.notifications import DESTRUCTIVE, NotificationCenter
from smartcare.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Record)


@dataclass
class QueryResult(Generic[T]):
    data: Optional[List[T]] = None
    is_loading: bool = False
    error: Optional[ApiError] = None


class ResourceHook(Generic[T]):
    """Read state and mutations for one backend collection"""

    resource: Resource
    model: Type[Record]
    text_key: str

    def __init__(self, transport: Transport, query_cache: QueryCache,
                 notifier: NotificationCenter, language: Callable[[], str] = lambda: "ko"):
        self.transport = transport
        self.cache = query_cache
        self.notifier = notifier
        self.language = language

    # Reads
    def _load(self) -> List[T]:
        rows = self.transport.request("GET", self.resource.path).json()
        return [self.model.from_dict(row) for row in rows or []]

    def list(self) -> QueryResult[T]:
        try:
            return QueryResult(data=self.cache.fetch(self.resource, self._load))
        except ApiError as e:
            logger.error(f"Query error ({self.resource.path}): {e}")
            return QueryResult(data=self.cache.get(self.resource), error=e)

    def refetch(self) -> QueryResult[T]:
        self.cache.remove(self.resource)
        return self.list()

    def items(self) -> List[T]:
        return self.list().data or []

    def get(self, entity_id: int) -> Optional[T]:
        for item in self.items():
            if item.id == entity_id:
                return item
        return None

    # Mutations
    def create(self, data: Dict[str, Any]) -> T:
        try:
            response = self.transport.request("POST", self.resource.path, to_payload(data))
            entity = self.model.from_dict(response.json())
        except (ApiError, ValueError) as e:
            self._failure("create", e)
            raise
        self.cache.patch(self.resource, cache.append(entity))
        self._success("create", entity)
        return entity

    def update(self, entity_id: int, data: Dict[str, Any]) -> T:
        try:
            response = self.transport.request("PUT", self.resource.item_path(entity_id), to_payload(data))
            entity = self.model.from_dict(response.json())
        except (ApiError, ValueError) as e:
            self._failure("update", e)
            raise
        self.cache.patch(self.resource, cache.replace(entity))
        self._success("update", entity)
        return entity

    def delete(self, entity_id: int) -> None:
        try:
            self.transport.request("DELETE", self.resource.item_path(entity_id))
        except ApiError as e:
            self._failure("delete", e)
            raise
        self.cache.patch(self.resource, cache.discard(entity_id))
        self._success("delete", None)

    # Notifications
    def _success(self, action: str, entity: Optional[T]):
        language = self.language()
        name = entity.label if entity is not None else ''
        self.notifier.toast(
            translate(f"{self.text_key}.{action}.success", language),
            translate(f"{self.text_key}.{action}.detail", language, name=name),
        )

    def _failure(self, action: str, error: Exception):
        if not isinstance(error, ApiError):
            logger.error(f"Unreadable response ({self.resource.path}): {error}")
        self.notifier.toast(
            translate(f"{self.text_key}.{action}.failure", self.language()),
            getattr(error, 'message', None) or str(error),
            variant=DESTRUCTIVE,
        )


class UserHook(ResourceHook[User]):
    resource = Resource.USERS
    model = User
    text_key = "users"

    def by_role(self, role: str) -> List[User]:
        return [user for user in self.items() if user.role == role]


class RoomHook(ResourceHook[Room]):
    resource = Resource.ROOMS
    model = Room
    text_key = "rooms"

    @staticmethod
    def is_out_of_range(room: Room) -> bool:
        """Current readings above the room's configured thresholds"""
        too_hot = (room.current_temp is not None and room.temp_threshold is not None
                   and room.current_temp > room.temp_threshold)
        too_humid = (room.current_humidity is not None and room.humidity_threshold is not None
                     and room.current_humidity > room.humidity_threshold)
        return too_hot or too_humid


class PatientHook(ResourceHook[Patient]):
    resource = Resource.PATIENTS
    model = Patient
    text_key = "patients"

    def in_room(self, room_id: int) -> List[Patient]:
        return [patient for patient in self.items() if patient.room_id == room_id]


class GuardianHook(ResourceHook[Guardian]):
    resource = Resource.GUARDIANS
    model = Guardian
    text_key = "guardians"

    def for_patient(self, patient_id: int) -> List[Guardian]:
        return [guardian for guardian in self.items() if guardian.patient_id == patient_id]


class AccidentHook(ResourceHook[Accident]):
    resource = Resource.ACCIDENTS
    model = Accident
    text_key = "accidents"

    def unresolved(self) -> List[Accident]:
        return [accident for accident in self.items() if not accident.resolved]

    def resolve(self, accident_id: int, resolved_by: int) -> Accident:
        return self.update(accident_id, {'resolved': True, 'resolved_by': resolved_by})


class EnvLogHook(ResourceHook[EnvLog]):
    resource = Resource.ENV_LOGS
    model = EnvLog
    text_key = "env_logs"

    def latest_for_room(self, room_id: int) -> Optional[EnvLog]:
        logs = [log for log in self.items() if log.room_id == room_id]
        if not logs:
            return None
        return max(logs, key=lambda log: (log.timestamp is not None, log.timestamp or 0, log.id))


class CameraHook(ResourceHook[Camera]):
    resource = Resource.CAMERAS
    model = Camera
    text_key = "cameras"


class MessageHook(ResourceHook[Message]):
    resource = Resource.MESSAGES
    model = Message
    text_key = "messages"

    def mark_read(self, message_id: int) -> Message:
        return self.update(message_id, {'read': True})

    def conversation(self, user_id: int, other_id: int) -> List[Message]:
        pair = {user_id, other_id}
        thread = [m for m in self.items() if {m.sender_id, m.receiver_id} == pair]
        return sorted(thread, key=lambda m: m.id)

    def unread_for(self, user_id: int) -> List[Message]:
        return [m for m in self.items() if m.receiver_id == user_id and not m.read]
