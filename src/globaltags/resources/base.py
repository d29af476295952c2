"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..cache import TagCache
    from ..client import GlobalTags
    from ..settings import Settings
    from ._common_types import ValidationMode


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "GlobalTags") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    @property
    def _settings(self) -> "Settings":
        return self._client.settings

    @property
    def _cache(self) -> "TagCache":
        return self._client.cache

    def _validation(self, validation: Optional[ValidationMode]) -> ValidationMode:
        return validation or self._client.validation

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._client.request(method, path, json=json, timeout=timeout, **kwargs)

    def _get(
        self,
        path: str,
        *,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request("GET", path, timeout=timeout)

    def _post(
        self,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request("POST", path, json=json, timeout=timeout, **kwargs)

    def _delete(
        self,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request("DELETE", path, json=json, timeout=timeout, **kwargs)
