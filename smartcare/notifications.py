"""User-visible notification side channel (toasts)."""
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: Optional[str] = None
    variant: str = DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE


class NotificationCenter:
    """Collects notifications until the UI drains and renders them"""

    def __init__(self):
        self.pending: List[Notification] = []
        self.history: List[Notification] = []

    def toast(self, title: str, description: Optional[str] = None, variant: str = DEFAULT) -> Notification:
        notification = Notification(title, description, variant)
        self.pending.append(notification)
        self.history.append(notification)
        if notification.is_error:
            logger.warning(f"Notification: {title} - {description}")
        return notification

    def drain(self) -> List[Notification]:
        items, self.pending = self.pending, []
        return items
