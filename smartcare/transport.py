"""HTTP transport with cookie credentials and uniform error translation."""
import logging
from typing import Any, Optional

import requests

from smartcare.cache import QueryCache
from smartcare.config import ApiConfig
from smartcare.errors import NetworkFailure, Unauthorized, error_for_response
from smartcare.routing import Router
from smartcare.session import SessionStore

logger = logging.getLogger(__name__)


class Transport:
    """Issues API requests; a 401 from any caller ends the session centrally"""

    def __init__(self, api_config: ApiConfig, http: Optional[requests.Session] = None,
                 session_store: Optional[SessionStore] = None, router: Optional[Router] = None,
                 query_cache: Optional[QueryCache] = None):
        self.base_url = api_config.base_url.rstrip('/')
        self.timeout = api_config.timeout
        # Cookie jar on the requests.Session carries the server session.
        self.http = http or requests.Session()
        self.session_store = session_store
        self.router = router
        self.query_cache = query_cache

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def request(self, method: str, path: str, body: Any = None) -> requests.Response:
        headers = {"Content-Type": "application/json"} if body is not None else {}
        logger.info(f"API request ({method} {path})")

        try:
            response = self.http.request(
                method,
                self.url(path),
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"API request failed ({method} {path}): {str(e)}")
            raise NetworkFailure(str(e)) from e

        error = error_for_response(response)
        if error is not None:
            logger.error(f"API error ({method} {path}): {response.status_code} {response.reason}")
            if isinstance(error, Unauthorized):
                self.handle_unauthorized(error)
            raise error

        return response

    def handle_unauthorized(self, error: Unauthorized):
        logger.error("401 from API - session is no longer valid")
        if self.query_cache is not None:
            self.query_cache.clear()
        if self.session_store is not None:
            self.session_store.clear(error)
        if self.router is not None:
            self.router.redirect_to_login()

    def get_json(self, path: str, on_401: str = "throw") -> Any:
        """GET ``path`` and decode it; ``on_401="return_none"`` yields None for 401"""
        if on_401 == "return_none":
            try:
                response = self.http.get(self.url(path), timeout=self.timeout)
            except requests.RequestException as e:
                logger.error(f"Query failed ({path}): {str(e)}")
                raise NetworkFailure(str(e)) from e
            logger.info(f"Query response ({path}): {response.status_code}")
            if response.status_code == 401:
                return None
            error = error_for_response(response)
            if error is not None:
                logger.error(f"Query error ({path}): {error}")
                raise error
            return response.json()

        return self.request("GET", path).json()
