"""Per-browser-session wiring of stores, transport, hooks and the gate."""
import logging
from typing import MutableMapping, Optional

import requests

from smartcare.auth import AuthService
from smartcare.bootstrap import BootstrapSequencer
from smartcare.cache import QueryCache
from smartcare.config import Config, Settings
from smartcare.notifications import NotificationCenter
from smartcare.resources import (
    AccidentHook,
    CameraHook,
    EnvLogHook,
    GuardianHook,
    MessageHook,
    PatientHook,
    RoomHook,
    UserHook,
)
from smartcare.routing import AccessGate, Router
from smartcare.session import SessionStore
from smartcare.storage import LocalStorage, SessionStorage
from smartcare.transport import Transport

logger = logging.getLogger(__name__)


class SmartCareClient:
    """Everything one signed-in (or signing-in) user needs, owned in one place"""

    def __init__(self, settings: Optional[Settings] = None, http: Optional[requests.Session] = None,
                 state: Optional[MutableMapping] = None, local: Optional[LocalStorage] = None):
        self.settings = settings or Config.settings()
        self.state = state if state is not None else {}

        self.local = local or LocalStorage(self.settings.storage.url)
        self.ephemeral = SessionStorage(self.state)
        self.session_store = SessionStore(self.state)
        self.router = Router(self.state, self.settings.app, self.ephemeral)
        self.cache = QueryCache()
        self.notifier = NotificationCenter()
        self.transport = Transport(self.settings.api, http=http,
                                   session_store=self.session_store, router=self.router,
                                   query_cache=self.cache)

        self.auth = AuthService(
            self.transport,
            self.session_store,
            self.cache,
            self.router,
            self.notifier,
            self.local,
            self.ephemeral,
            default_language=self.settings.app.default_language,
        )
        self.bootstrap = BootstrapSequencer(self.auth)
        self.gate = AccessGate(self.session_store, login_route=self.settings.app.login_route)

        hook_args = (self.transport, self.cache, self.notifier, self.auth.language)
        self.users = UserHook(*hook_args)
        self.rooms = RoomHook(*hook_args)
        self.patients = PatientHook(*hook_args)
        self.guardians = GuardianHook(*hook_args)
        self.accidents = AccidentHook(*hook_args)
        self.env_logs = EnvLogHook(*hook_args)
        self.cameras = CameraHook(*hook_args)
        self.messages = MessageHook(*hook_args)

        logger.info(f"Client initialized for {self.settings.api.base_url}")

    @property
    def user(self):
        return self.session_store.user

    def start(self):
        """Run the bootstrap check (once) and return the resulting session"""
        return self.bootstrap.run()
