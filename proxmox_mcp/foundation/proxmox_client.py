"""Proxmox VE API client.

Every call opens its own ``aiohttp.ClientSession``, sends exactly one request
and returns the ``data`` member of the JSON envelope. The client keeps no
per-request state, so a single instance can be shared by concurrent tool calls.
"""

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import aiohttp

from ..config import Config
from ..core_utils import LoggingUtility

API_PREFIX = "/api2/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ProxmoxApiError(Exception):
    """Proxmox API specific errors.

    ``details`` holds the ``errors`` object of the response, the whole parsed
    body when ``errors`` is missing, or the raw text for undecodable bodies.
    """

    def __init__(self, status_code: int, details: Any):
        self.status_code = status_code
        self.details = details
        super().__init__(
            f"Proxmox API error {status_code}: {json.dumps(details, default=str)}"
        )


class ProxmoxDecodeError(ProxmoxApiError):
    """The response body was not valid JSON."""

    def __init__(self, status_code: int, raw_text: str):
        self.raw_text = raw_text
        super().__init__(status_code, raw_text)


def encode_value(value: Any) -> str:
    """Stringify a parameter value; booleans use the API's 1/0 form."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_params(params: Optional[Mapping[str, Any]]) -> str:
    """URL-encode a parameter mapping, dropping ``None`` values."""
    if not params:
        return ""
    return urlencode(
        [(key, encode_value(value)) for key, value in params.items() if value is not None]
    )


class ProxmoxClient:
    """Async HTTP client for the Proxmox VE API."""

    def __init__(self, config: Config):
        self.base_url = f"https://{config.host}:{config.port}{API_PREFIX}"
        self._auth_header = f"PVEAPIToken={config.token_id}={config.token_secret}"
        # False disables peer certificate verification for every request
        self.verify_ssl = not config.allow_self_signed_certs

    def __repr__(self) -> str:
        return f"ProxmoxClient(base_url={self.base_url!r}, verify_ssl={self.verify_ssl})"

    async def fetch(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET ``path`` with optional query parameters."""
        return await self._request("GET", self._build_url(path, params))

    async def create(self, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        """POST ``path`` with an optional form-encoded body."""
        return await self._request("POST", self._build_url(path), data)

    async def replace(self, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        """PUT ``path`` with an optional form-encoded body."""
        return await self._request("PUT", self._build_url(path), data)

    async def remove(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """DELETE ``path`` with optional query parameters."""
        return await self._request("DELETE", self._build_url(path, params))

    def _build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        url = f"{self.base_url}{path}"
        query = encode_params(params)
        if query:
            url = f"{url}?{query}"
        return url

    async def _request(
        self, method: str, url: str, data: Optional[Mapping[str, Any]] = None
    ) -> Any:
        headers: Dict[str, str] = {"Authorization": self._auth_header}
        body: Optional[bytes] = None
        if data is not None:
            body = encode_params(data).encode("utf-8")
            headers["Content-Type"] = FORM_CONTENT_TYPE
            headers["Content-Length"] = str(len(body))

        LoggingUtility.log_debug("proxmox request", f"{method} {url}")

        async with aiohttp.ClientSession() as session:
            async with session.request(
                method, url, data=body, headers=headers, ssl=self.verify_ssl
            ) as response:
                raw = await response.read()
                return self._handle_response(response.status, raw)

    @staticmethod
    def _handle_response(status: Optional[int], raw: bytes) -> Any:
        """Unwrap the JSON envelope or raise a normalized error."""
        text = raw.decode("utf-8", errors="replace")
        try:
            payload = json.loads(text)
        except ValueError:
            raise ProxmoxDecodeError(status or 500, text)

        if status is not None and status >= 400:
            errors = payload.get("errors") if isinstance(payload, dict) else None
            raise ProxmoxApiError(status, errors if errors is not None else payload)

        if isinstance(payload, dict):
            return payload.get("data")
        return None
