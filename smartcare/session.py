"""Session Store: the client's view of who is signed in."""
import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import MutableMapping, Optional

from smartcare.errors import ApiError
from smartcare.models import User

logger = logging.getLogger(__name__)


class AuthState(str, Enum):
    UNCHECKED = "unchecked"
    CHECKING = "checking"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class Session:
    state: AuthState = AuthState.UNCHECKED
    user: Optional[User] = None
    error: Optional[ApiError] = None

    @property
    def is_loading(self) -> bool:
        return self.state in (AuthState.UNCHECKED, AuthState.CHECKING)


class SessionStore:
    """Holds the current Session; every write swaps the whole value"""

    KEY = 'session'

    def __init__(self, state: Optional[MutableMapping] = None):
        self.state = state if state is not None else {}
        self._lock = threading.RLock()
        if self.KEY not in self.state:
            self.state[self.KEY] = Session()

    @property
    def session(self) -> Session:
        return self.state[self.KEY]

    @property
    def user(self) -> Optional[User]:
        return self.session.user

    @property
    def is_authenticated(self) -> bool:
        return self.session.state == AuthState.AUTHENTICATED and self.session.user is not None

    def _set(self, session: Session) -> Session:
        with self._lock:
            self.state[self.KEY] = session
        return session

    def begin_check(self) -> Session:
        return self._set(replace(self.session, state=AuthState.CHECKING, error=None))

    def authenticate(self, user: User) -> Session:
        logger.info(f"Session authenticated: {user.username} ({user.role})")
        return self._set(Session(state=AuthState.AUTHENTICATED, user=user))

    def clear(self, error: Optional[ApiError] = None) -> Session:
        if self.session.user is not None:
            logger.info("Session cleared")
        return self._set(Session(state=AuthState.UNAUTHENTICATED, error=error))
