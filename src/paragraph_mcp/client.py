"""
Paragraph API Client
Builds authenticated requests against the Paragraph REST API and classifies the responses.
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import httpx

from .config import ParagraphConfig
from .errors import ConfigurationError, ParagraphAPIError

logger = logging.getLogger(__name__)

# Fields probed (in order) for a human readable message in an error body
ERROR_MESSAGE_FIELDS = ("msg", "message", "error")

# Returned for 204 / zero-length responses
EMPTY_SUCCESS = {"success": True}


def quote_segment(value: Any) -> str:
    """URL-encode a single path segment (slashes included)."""
    return quote(str(value), safe="")


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop None values and render the rest the way the API expects them."""
    cleaned: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = str(value)
    return cleaned


def extract_error_message(response: httpx.Response) -> str:
    """
    Derive the failure message for a non-2xx response.

    Tries the JSON body fields in ERROR_MESSAGE_FIELDS order and falls back to
    the HTTP status line when the body is not JSON or carries none of them.
    """
    fallback = f"HTTP {response.status_code} {response.reason_phrase}".rstrip()
    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback

    for field_name in ERROR_MESSAGE_FIELDS:
        value = body.get(field_name)
        if value:
            return str(value)
    return fallback


class ParagraphClient:
    """Authenticated async client for the Paragraph API."""

    def __init__(self, config: ParagraphConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client.

        Args:
            config: API credentials and base URL
            transport: Optional httpx transport (tests pass an httpx.MockTransport)
        """
        self.config = config
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None
        self._request_count = 0

    @property
    def request_count(self) -> int:
        """Number of requests actually sent over the wire."""
        return self._request_count

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                transport=self._transport,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._http

    def _auth_headers(self) -> Dict[str, str]:
        if not self.config.api_key:
            raise ConfigurationError("PARAGRAPH_API_KEY environment variable not set")
        return {"Authorization": f"Bearer {self.config.api_key}"}

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and raise ParagraphAPIError for non-2xx responses."""
        request_headers = self._auth_headers()

        kwargs: Dict[str, Any] = {"params": clean_params(params)}
        if json_body is not None:
            kwargs["json"] = json_body
            request_headers["Content-Type"] = "application/json"
        elif files is not None:
            # httpx sets the multipart Content-Type with its own boundary
            kwargs["files"] = files
        elif content is not None:
            kwargs["content"] = content
            request_headers.update(headers or {})

        logger.debug(f"{method} {self.config.base_url}{path} params={kwargs['params']}")

        self._request_count += 1
        response = await self._get_http().request(method, path, headers=request_headers, **kwargs)

        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(f"{method} {path} failed with {response.status_code}: {message}")
            raise ParagraphAPIError(message, status_code=response.status_code)

        return response

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Make an authenticated request to the Paragraph API.

        Args:
            method: HTTP method
            path: Endpoint path without the base URL (e.g. "/v1/posts")
            body: JSON body
            params: Query parameters (None values are skipped)
            content: Raw body, sent verbatim with `headers` when no JSON body is given
            headers: Extra headers for a raw body

        Returns:
            Parsed JSON, raw text, or {"success": True} for empty or `null` responses

        Raises:
            ConfigurationError: If no API key is configured (no request is sent)
            ParagraphAPIError: On any non-2xx response
        """
        response = await self._send(
            method, path, json_body=body, params=params, content=content, headers=headers
        )

        if response.status_code == 204 or not response.content:
            return dict(EMPTY_SUCCESS)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            data = response.json()
            return dict(EMPTY_SUCCESS) if data is None else data
        return response.text

    async def upload(
        self,
        path: str,
        files: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Any]:
        """
        POST a multipart form.

        Returns:
            Parsed JSON body, or None for a 204 / empty response
        """
        response = await self._send("POST", path, params=params, files=files)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def aclose(self):
        """Release the underlying connection pool."""
        if self._http is not None and not self._http.is_closed:
            await self._http.aclose()
            logger.info("Paragraph HTTP client closed")
        self._http = None

    def get_client_info(self) -> dict:
        """
        Get information about the client state.

        Returns:
            Dictionary with configuration (API key masked) and request counters
        """
        info = self.config.describe()
        info["requests_sent"] = self._request_count
        info["open"] = self._http is not None and not self._http.is_closed
        return info
