"""One-time startup reconciliation of local credentials with the server session."""
import logging
import time
from typing import Callable, Optional

import jwt
import requests

from smartcare.auth import AuthService
from smartcare.cache import Resource
from smartcare.errors import MalformedCredentialArtifact, NetworkFailure
from smartcare.session import AuthState, Session
from smartcare.storage import REDIRECT_ATTEMPT_KEY, TOKEN_KEY

logger = logging.getLogger(__name__)


def token_expiry(token: str) -> Optional[float]:
    """Return the ``exp`` claim (epoch seconds) of a JWT without verifying it"""
    if token.count('.') != 2:
        raise MalformedCredentialArtifact("token is not a three-part JWT")
    try:
        payload = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.InvalidTokenError as e:
        raise MalformedCredentialArtifact(str(e)) from e
    exp = payload.get('exp')
    if exp is None:
        return None
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise MalformedCredentialArtifact(f"exp claim is not numeric: {exp!r}")
    return float(exp)


class BootstrapSequencer:
    """Runs once per browser session before any page is rendered"""

    def __init__(self, auth: AuthService, clock: Callable[[], float] = time.time):
        self.auth = auth
        self.clock = clock

    def clear_redirect_state(self):
        """Reset the redirect counter and drop a stale or undecodable token"""
        self.auth.ephemeral.remove_item(REDIRECT_ATTEMPT_KEY)

        token = self.auth.local.get_item(TOKEN_KEY)
        if not token:
            return
        try:
            expiry = token_expiry(token)
        except MalformedCredentialArtifact as e:
            logger.info(f"Discarding undecodable token: {e}")
            self.auth.local.remove_item(TOKEN_KEY)
            return
        if expiry is not None and self.clock() >= expiry:
            logger.info("Discarding expired token")
            self.auth.local.remove_item(TOKEN_KEY)

    def check_logged_in_status(self) -> Session:
        """Ask the server whether the cookie session is still valid"""
        store = self.auth.session_store
        router = self.auth.router
        transport = self.auth.transport
        store.begin_check()

        try:
            response = transport.http.get(transport.url(Resource.USER.path), timeout=transport.timeout)
            payload = response.json() if response.ok else None
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Session check failed: {str(e)}")
            store.clear(NetworkFailure(str(e)))
            router.auto_redirect_to_login()
            return store.session

        if payload:
            user = self.auth.remember_identity(payload)
            logger.info(f"Session restored: {user.username} ({user.role})")
            if router.location == router.config.login_route:
                router.go_home()
        else:
            logger.info(f"No valid session (status {response.status_code})")
            store.clear()
            router.auto_redirect_to_login()
        return store.session

    def run(self) -> Session:
        store = self.auth.session_store
        if self.auth.initial_checked:
            return store.session
        try:
            self.clear_redirect_state()
            return self.check_logged_in_status()
        finally:
            if store.session.state == AuthState.CHECKING:
                store.clear()
            store.state[AuthService.CHECKED_KEY] = True
