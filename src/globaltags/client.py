"""Core GlobalTags client with a raw-request escape hatch."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .cache import TagCache
from .resources._common_types import ValidationMode
from .resources.generation import Generation
from .resources.tags import Tags
from .settings import Settings


class GlobalTags:
    """Resource-grouped client for a tags server and an optional generation server."""

    tags: Tags

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        cache: Optional[TagCache] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
        validation: ValidationMode = "warn",
    ) -> None:
        """Create a client bound to a settings object.

        Parameters
        ----------
        settings
            Settings to read server URLs and keys from on every request.
        cache
            Tag cache to share with other components. A fresh one is created
            when omitted.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        validation
            Default validation mode for resource inputs.
        """
        self.settings = settings or Settings()
        self.cache = cache if cache is not None else TagCache()
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self.validation: ValidationMode = validation
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.tags: Tags = Tags(self)
        self._generation = Generation(self)

    @property
    def generation(self) -> Optional[Generation]:
        """The generation resource, or None while ``settings.generation_enabled`` is off."""
        return self._generation if self.settings.generation_enabled else None

    @property
    def requester(self) -> Any:
        """The session in use, or the ``requests`` module itself."""
        return self._session or requests

    def build_url(self, path: str, base_url: Optional[str] = None) -> str:
        base = (base_url if base_url is not None else self.settings.server_url) or ""
        if not path.startswith("/"):
            path = "/" + path
        return base.rstrip("/") + path

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Optional[int] = None,
        base_url: Optional[str] = None,
        check_status: bool = True,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the tags server.

        Parameters
        ----------
        method
            HTTP method (GET, POST, DELETE).
        path
            Endpoint path, joined onto the server base URL.
        json
            JSON payload for the request.
        headers
            Extra request headers.
        timeout
            Timeout in seconds for this request.
        base_url
            Override for the base URL (defaults to ``settings.server_url``).
        check_status
            When False, error statuses are not raised and their body is parsed
            like any other response.
        raise_on_error
            Per-call override of the client's ``raise_on_error``.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response is empty or non-JSON.
        """
        should_raise = self.raise_on_error if raise_on_error is None else raise_on_error
        url = self.build_url(path, base_url)

        try:
            response = self.requester.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=timeout or self.default_timeout,
            )
            if check_status:
                response.raise_for_status()
        except requests.HTTPError as exc:
            if should_raise:
                raise
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
                    elif "detail" in error_body:
                        error_msg = f"{exc}\nDetails: {error_body['detail']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            return None
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if should_raise:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return None

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:  # noqa: PERF203 - only attempt JSON when present
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return None
        if isinstance(payload, (dict, list)):
            return payload
        return None


__all__ = ["GlobalTags"]
