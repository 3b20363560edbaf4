"""Login, registration, logout and the current-identity query."""
import logging
from typing import Any, Dict, Optional

from smartcare.cache import QueryCache, Resource
from smartcare.errors import ApiError, Unauthorized
from smartcare.i18n import translate
from smartcare.models import User, to_payload
from smartcare.notifications import DESTRUCTIVE, NotificationCenter
from smartcare.routing import Router
from smartcare.session import SessionStore
from smartcare.storage import REDIRECT_ATTEMPT_KEY, TOKEN_KEY, LocalStorage, SessionStorage
from smartcare.transport import Transport

logger = logging.getLogger(__name__)


class AuthService:
    """Session-changing operations; only server responses set the identity"""

    CHECKED_KEY = 'bootstrap_checked'

    def __init__(self, transport: Transport, session_store: SessionStore, query_cache: QueryCache,
                 router: Router, notifier: NotificationCenter, local: LocalStorage,
                 ephemeral: SessionStorage, default_language: str = "ko"):
        self.transport = transport
        self.session_store = session_store
        self.cache = query_cache
        self.router = router
        self.notifier = notifier
        self.local = local
        self.ephemeral = ephemeral
        self.default_language = default_language

    @property
    def initial_checked(self) -> bool:
        return bool(self.session_store.state.get(self.CHECKED_KEY))

    def language(self) -> str:
        user = self.session_store.user
        if user is not None and user.preferred_language:
            return user.preferred_language
        return self.default_language

    def _t(self, key: str, **params) -> str:
        return translate(key, self.language(), **params)

    def remember_identity(self, payload: Dict[str, Any]) -> User:
        token = payload.get('token')
        if token:
            self.local.set_item(TOKEN_KEY, token)
        user = User.from_dict(payload)
        self.cache.set(Resource.USER, user)
        self.session_store.authenticate(user)
        return user

    def _start_session(self, payload: Dict[str, Any]) -> User:
        # A new sign-in never sees data cached for the previous identity.
        self.ephemeral.remove_item(REDIRECT_ATTEMPT_KEY)
        self.cache.clear()
        return self.remember_identity(payload)

    def fetch_user(self) -> Optional[User]:
        """Current-identity query; disabled until the bootstrap check has run"""
        if not self.initial_checked:
            return None
        try:
            payload = self.transport.get_json(Resource.USER.path, on_401="return_none")
        except ApiError as e:
            logger.error(f"Failed to load current user: {e}")
            payload = None
        if not payload:
            self.cache.set(Resource.USER, None)
            self.session_store.clear()
            return None
        return self.remember_identity(payload)

    def login(self, username: str, password: str) -> User:
        try:
            response = self.transport.request("POST", "/api/login",
                                              {'username': username, 'password': password})
            payload = response.json()
        except ApiError as e:
            logger.error(f"Login failed for {username}: {e}")
            reason = self._t("login.invalid") if isinstance(e, Unauthorized) else self._t("login.generic")
            self.notifier.toast(self._t("login.failure"), reason, variant=DESTRUCTIVE)
            raise

        user = self._start_session(payload)
        logger.info(f"Login successful: {user.username}")
        self.notifier.toast(self._t("login.success"), self._t("login.welcome", name=user.name))
        self.router.go_home()
        return user

    def register(self, data: Dict[str, Any]) -> User:
        try:
            response = self.transport.request("POST", "/api/register", to_payload(data))
            payload = response.json()
        except ApiError as e:
            self.notifier.toast(self._t("register.failure"), e.message or str(e), variant=DESTRUCTIVE)
            raise

        user = self._start_session(payload)
        self.notifier.toast(self._t("register.success"), self._t("register.created"))
        self.router.go_home()
        return user

    def logout(self) -> None:
        try:
            self.transport.request("POST", "/api/logout")
        except ApiError as e:
            self.notifier.toast(self._t("logout.failure"), e.message or str(e), variant=DESTRUCTIVE)
            raise

        language = self.language()
        self.local.remove_item(TOKEN_KEY)
        self.cache.clear()
        self.session_store.clear()
        self.notifier.toast(translate("logout.success", language))
        self.router.navigate(self.router.config.login_route)
