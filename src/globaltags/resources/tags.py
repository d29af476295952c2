"""Tag resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .tags_types import ApiResponse, TagCreate, TagResponse, is_tag
from ._common_types import ValidationMode, _normalize_tag_name, _tag_path


class Tags(Resource):
    """Tag operations backed by the client's cache."""

    def fetch(
        self,
        name: str,
        *,
        validation: Optional[ValidationMode] = None,
        timeout: Optional[int] = None,
    ) -> TagResponse | None:
        """Fetch a single tag, preferring the cache.

        Parameters
        ----------
        name
            Tag name (case-sensitive).
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        TagResponse or None
            The tag, or ``None`` when it does not exist or could not be read.
        """
        validation = self._validation(validation)
        if validation != "off" and _normalize_tag_name(name) is None:
            if validation == "strict":
                raise ValueError(f"Invalid tag name: {name!r}")
            self._logger.warning("Invalid tag name for fetch: %r", name)
            return None

        cached = self._cache.get(name)
        if cached is not None:
            self._logger.info("Fetched tag from cache: %s", name)
            return cached

        version = self._cache.version(name)
        response = self._get(_tag_path(name), timeout=timeout)
        if not is_tag(response):
            return None
        # A create or delete that finished during the request wins over this read.
        self._cache.store(name, response, if_version=version)
        return response

    def list(
        self,
        owner_id: Optional[str] = None,
        *,
        timeout: Optional[int] = None,
    ) -> list[TagResponse]:
        """Fetch all tags, optionally only those owned by ``owner_id``.

        Parameters
        ----------
        owner_id
            Owner identity to filter on. ``None`` returns every tag.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[TagResponse]
            Matching tags; empty on any failure.
        """
        response = self._get("/tags", timeout=timeout)
        if not isinstance(response, list):
            if response is not None:
                self._logger.warning("Tags response was not a list.")
            return []

        tags = [tag for tag in response if is_tag(tag)]
        if owner_id:
            return [tag for tag in tags if tag["owner_id"] == owner_id]
        return tags

    def warm(self, *, timeout: Optional[int] = None) -> int:
        """Load every tag from the server into the cache; returns the count."""
        return self._cache.warm(self.list(timeout=timeout))

    def create(
        self,
        tag: TagCreate,
        *,
        validation: Optional[ValidationMode] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse:
        """Create a tag on the server.

        Parameters
        ----------
        tag
            Name, message and owner fields of the new tag. The server key from
            settings is added to the request body.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        ApiResponse
            ``{"success": True, ...}`` on success, otherwise ``success`` is False
            and ``error`` describes the failure.
        """
        name = tag.get("name")
        validation = self._validation(validation)
        if validation != "off" and _normalize_tag_name(name) is None:
            if validation == "strict":
                raise ValueError(f"Invalid tag name: {name!r}")
            self._logger.warning("Invalid tag name for create: %r", name)
            return {"success": False, "error": f"Invalid tag name: {name!r}"}

        payload = {
            "name": name,
            "message": tag.get("message"),
            "owner": tag.get("owner"),
            "owner_id": tag.get("owner_id"),
            "key": self._settings.server_key,
        }
        result = self._write("POST", "/tags", payload, name, timeout=timeout)
        if result.get("success"):
            self._cache.invalidate(name)
        return result

    def delete(
        self,
        name: str,
        *,
        validation: Optional[ValidationMode] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse:
        """Delete a tag on the server.

        Ownership is enforced by the server through the key; callers that
        want a friendlier message check ``owner_id`` first.

        Returns
        -------
        ApiResponse
            Same shape as :meth:`create`.
        """
        validation = self._validation(validation)
        if validation != "off" and _normalize_tag_name(name) is None:
            if validation == "strict":
                raise ValueError(f"Invalid tag name: {name!r}")
            self._logger.warning("Invalid tag name for delete: %r", name)
            return {"success": False, "error": f"Invalid tag name: {name!r}"}

        payload = {"key": self._settings.server_key}
        result = self._write("DELETE", _tag_path(name), payload, name, timeout=timeout)
        if result.get("success"):
            self._cache.invalidate(name)
        return result

    def _write(
        self,
        method: str,
        path: str,
        payload: dict[str, object],
        name: object,
        *,
        timeout: Optional[int] = None,
    ) -> ApiResponse:
        action = "create" if method == "POST" else "delete"
        try:
            # Error statuses still carry a {success, error} body worth reading.
            response = self._request(
                method,
                path,
                json=payload,
                timeout=timeout,
                check_status=False,
                raise_on_error=True,
            )
        except Exception as exc:  # noqa: BLE001 - report transport failures as results
            self._logger.error("Failed to %s tag %r: %s", action, name, exc)
            return {"success": False, "error": str(exc)}

        if not isinstance(response, dict):
            self._logger.error("Malformed %s response for tag %r: %r", action, name, response)
            return {"success": False, "error": "Malformed response from tag server"}

        result: ApiResponse = {"success": bool(response.get("success"))}
        if is_tag(response.get("data")):
            result["data"] = response["data"]
        error = response.get("error")
        if error is not None:
            result["error"] = str(error)
        return result
