"""Shared async HTTP plumbing for the storefront's JSON services.

Every response is an envelope ``{"success": bool, "data": ..., "message": ...}``.
Transport failures, 5xx, 408 and 429 are reported as retryable ProviderErrors; other
non-success statuses and malformed envelopes are not.
"""

from typing import Any

import httpx
import structlog

from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
)

logger = structlog.get_logger()

_RETRYABLE_STATUSES = frozenset({408, 429})


class StorefrontHttpClient:
    PROVIDER = "storefront"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    def _headers(self, session_token: str | None) -> dict[str, str]:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if session_token:
            headers["Authorization"] = f"Bearer {session_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        session_token: str | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> Any:
        """Performs the call and returns the envelope's ``data``."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = self._headers(session_token)
        logger.debug(
            "Storefront call",
            provider=self.PROVIDER,
            method=method,
            url=url,
            headers=redact_dict(headers),
        )
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, headers=headers, json=json_data)
        except httpx.TransportError as e:
            raise ProviderError(
                self.PROVIDER, f"{method} {path} failed: {redact_text(str(e))}", retryable=True
            ) from e

        if response.is_error:
            status = response.status_code
            raise ProviderError(
                self.PROVIDER,
                f"{method} {path} returned {status}: {self._message(response)}",
                retryable=status >= 500 or status in _RETRYABLE_STATUSES,
                status_code=status,
            )
        return self._unwrap(method, path, response)

    def _unwrap(self, method: str, path: str, response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError(
                self.PROVIDER,
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from e
        if not isinstance(body, dict) or body.get("success") is False or "data" not in body:
            raise ProviderError(
                self.PROVIDER,
                f"{method} {path} returned an unexpected envelope",
                status_code=response.status_code,
            )
        logger.debug("Storefront call succeeded", method=method, path=path)
        return body["data"]

    @staticmethod
    def _message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return redact_text(response.text[:200])
        if isinstance(body, dict):
            return redact_text(str(body.get("message", "")))
        return ""
