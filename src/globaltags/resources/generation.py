"""Text-generation resource wrapper (Ollama-compatible ``/api/generate``)."""

from __future__ import annotations

from typing import Any, Optional

from .base import Resource
from ..utils import trim_span

FALLBACK_MODEL = "llama3"
REASONING_START = "<think>"
REASONING_END = "</think>"
MALFORMED_RESPONSE = (
    "Received malformed response from the generation server. Check logs for details."
)


class Generation(Resource):
    """Prompt a text-generation server configured in settings."""

    def endpoint(self) -> str:
        base = self._settings.generation_url
        return f"{base}api/generate" if base.endswith("/") else f"{base}/api/generate"

    def generate(self, prompt: str, *, timeout: Optional[int] = None) -> str | None:
        """Generate a completion for ``prompt``.

        Parameters
        ----------
        prompt
            Prompt text sent verbatim.
        timeout
            Request timeout in seconds.

        Returns
        -------
        str or None
            Generated text with the first reasoning span removed, a diagnostic
            placeholder when the server answered without text, or ``None`` on
            failure.
        """
        if not self._settings.generation_url:
            self._logger.error("Generation URL is not configured. Set it in the extension settings.")
            return None

        url = self.endpoint()
        body = {
            "model": self._settings.generation_model or FALLBACK_MODEL,
            "prompt": prompt,
            "stream": False,
        }
        headers = {"Content-Type": "application/json"}
        if self._settings.generation_key:
            headers["Authorization"] = f"Bearer {self._settings.generation_key}"

        self._logger.info("Sending generation request to %s (model %s)", url, body["model"])
        try:
            response = self._client.requester.request(
                "POST",
                url,
                json=body,
                headers=headers,
                timeout=timeout or self._client.default_timeout,
            )
        except Exception as exc:  # noqa: BLE001 - generation failures are reported, not raised
            self._logger.error("Failed to generate: %s", exc)
            return None

        if not response.ok:
            self._log_status_error(response)
            return None

        try:
            data: Any = response.json()
        except ValueError:
            self._logger.error("Generation response from %s was not JSON", url)
            return None

        text = data.get("response") if isinstance(data, dict) else None
        if not text:
            self._logger.error("Generation response missing expected 'response' field: %r", data)
            return MALFORMED_RESPONSE

        text = str(text)
        self._logger.info("Received generation response (%d chars)", len(text))
        return trim_span(REASONING_START, REASONING_END, text)

    def _log_status_error(self, response: Any) -> None:
        status = response.status_code
        self._logger.error("Generation API error: %s %s", status, getattr(response, "reason", ""))
        if status == 404:
            self._logger.error("API endpoint not found. Check the generation URL setting.")
        elif status in (401, 403):
            self._logger.error("Authentication error. Check the generation key setting.")
        try:
            self._logger.error("Error details: %s", response.text)
        except Exception:  # noqa: BLE001 - details are best effort
            pass
