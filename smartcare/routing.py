"""Route table, page location and the role-aware Access Gate."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, MutableMapping, Optional, Sequence, Tuple

from smartcare.config import AppConfig
from smartcare.models import UserRole
from smartcare.session import SessionStore
from smartcare.storage import REDIRECT_ATTEMPT_KEY, SessionStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    pattern: str
    name: str
    roles: Optional[Tuple[str, ...]] = None
    public: bool = False

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Return extracted ``:param`` values if ``path`` matches, else None"""
        expected = [part for part in self.pattern.split('/') if part]
        actual = [part for part in path.split('?')[0].split('/') if part]
        if len(expected) != len(actual):
            return None
        params = {}
        for want, got in zip(expected, actual):
            if want.startswith(':'):
                params[want[1:]] = got
            elif want != got:
                return None
        return params


ROUTES: Tuple[Route, ...] = (
    Route("/auth", "auth", public=True),
    Route("/", "home"),
    Route("/dashboard", "dashboard"),
    Route("/fall-detection", "fall_detection"),
    Route("/environment", "environment"),
    Route("/patients/:id", "patient_detail"),
    Route("/mypage", "mypage"),
    Route("/accounts", "accounts", roles=UserRole.STAFF),
    Route("/room-management", "room_management", roles=UserRole.STAFF),
    Route("/messages", "messages"),
    Route("/settings", "settings"),
)


def resolve(path: str, routes: Sequence[Route] = ROUTES) -> Tuple[Optional[Route], Dict[str, str]]:
    for route in routes:
        params = route.match(path)
        if params is not None:
            return route, params
    return None, {}


class Router:
    """Single owner of the current page location"""

    KEY = 'location'

    def __init__(self, state: MutableMapping, app_config: AppConfig, ephemeral: SessionStorage):
        self.state = state
        self.config = app_config
        self.ephemeral = ephemeral
        self.state.setdefault(self.KEY, app_config.home_route)

    @property
    def location(self) -> str:
        return self.state[self.KEY]

    def navigate(self, path: str):
        if path != self.location:
            logger.info(f"Navigate {self.location} -> {path}")
        self.state[self.KEY] = path

    def redirect_to_login(self) -> bool:
        """Send the user to the login page unless already there"""
        if self.location == self.config.login_route:
            return False
        self.navigate(self.config.login_route)
        return True

    def auto_redirect_to_login(self) -> bool:
        """Page-level redirect for a missing identity, capped per browser session"""
        if self.location == self.config.login_route:
            return False
        attempts = int(self.ephemeral.get_item(REDIRECT_ATTEMPT_KEY) or 0)
        if attempts >= self.config.max_redirect_attempts:
            logger.warning(f"Suppressed login redirect after {attempts} attempts")
            return False
        self.ephemeral.set_item(REDIRECT_ATTEMPT_KEY, attempts + 1)
        return self.redirect_to_login()

    def go_home(self):
        self.navigate(self.config.home_route)


class Admission(str, Enum):
    RENDER = "render"
    REDIRECT = "redirect"
    DENY = "deny"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Decision:
    admission: Admission
    route: Optional[Route] = None
    params: Optional[Dict[str, str]] = None
    redirect_to: Optional[str] = None


class AccessGate:
    """Admit, redirect or deny a navigation based on the Session Store"""

    def __init__(self, session_store: SessionStore, login_route: str = "/auth",
                 routes: Sequence[Route] = ROUTES):
        self.session_store = session_store
        self.login_route = login_route
        self.routes = routes

    def check(self, path: str) -> Decision:
        route, params = resolve(path, self.routes)
        if route is None:
            return Decision(Admission.NOT_FOUND)
        if route.public:
            return Decision(Admission.RENDER, route, params)
        user = self.session_store.user
        if user is None:
            return Decision(Admission.REDIRECT, route, params, redirect_to=self.login_route)
        if route.roles and user.role not in route.roles:
            return Decision(Admission.DENY, route, params)
        return Decision(Admission.RENDER, route, params)

    def admit(self, path: str) -> Admission:
        return self.check(path).admission
