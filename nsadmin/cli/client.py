"""
HTTP Client for the admin API.

APIClient wraps a synchronous httpx.Client bound to the base URL given on
the command line. NamespaceClient adds one method per admin endpoint.

Every NamespaceClient method performs exactly one HTTP call and either
returns its result or raises a ClientError subclass (see
nsadmin.core.exceptions). URLs are built by plain interpolation; namespace
names are not validated here.
"""

from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from nsadmin.core.config import get_client_defaults
from nsadmin.core.exceptions import MalformedResponseError, RemoteError, TransportError
from nsadmin.core.logging import get_logger, log_with_source
from nsadmin.schemas.namespace import NamespaceConfig, NamespaceStats, ServerError

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for admin API communication.

    Features:
    - Base URL from the command line, timeout and user agent from client.yaml
    - Structured logging of requests/responses
    - httpx transport errors translated to TransportError

    Usage:
        with APIClient("http://127.0.0.1:8081") as client:
            response = client.get("/v1/namespaces/db1/stats")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Admin API base URL, e.g. http://127.0.0.1:8081
            timeout: Request timeout in seconds. If None, reads from client.yaml.
            transport: Optional httpx transport (used to plug in fake servers).
        """
        config_timeout, user_agent, follow_redirects = get_client_defaults()

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self._user_agent = user_agent
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"User-Agent": self._user_agent},
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the admin API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path (e.g., /v1/namespaces/db1/stats)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            TransportError: On connection failure, DNS failure or timeout
        """
        client = self._get_client()

        log_with_source(
            logger,
            "client",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "client",
                "info",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise TransportError(f"{method} {self.base_url}{path} failed: {e}") from e

        log_with_source(
            logger,
            "client",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        return response

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return self.request("POST", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return self.request("DELETE", path, **kwargs)


def _parse_body(response: httpx.Response, model: type[BaseModel]) -> Any:
    """Validate a response body against a schema."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected {model.__name__} body (HTTP {response.status_code}): {response.text!r}"
        ) from e


class NamespaceClient(APIClient):
    """
    Admin API operations on namespaces.

    Lifecycle calls (create, delete, fork) require error bodies shaped like
    {"error": "<message>"}; anything else raises MalformedResponseError.
    Read and config calls accept any error body and report it verbatim.
    """

    def _check(self, response: httpx.Response, strict_errors: bool) -> None:
        """Raise RemoteError for non-2xx responses."""
        if response.is_success:
            return

        log_with_source(
            logger,
            "client",
            "info",
            "API error response",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            body=response.text,
        )

        if strict_errors:
            error = _parse_body(response, ServerError)
            raise RemoteError(error.error, response.status_code)

        try:
            message = ServerError.model_validate_json(response.content).error
        except ValidationError:
            message = response.text or f"HTTP {response.status_code}"
        raise RemoteError(message, response.status_code)

    def create_namespace(self, namespace: str) -> None:
        response = self.post(f"/v1/namespaces/{namespace}/create", json={})
        self._check(response, strict_errors=True)

    def delete_namespace(self, namespace: str) -> None:
        response = self.delete(f"/v1/namespaces/{namespace}")
        self._check(response, strict_errors=True)

    def fork_namespace(self, source: str, target: str) -> None:
        response = self.post(f"/v1/namespaces/{source}/fork/{target}")
        self._check(response, strict_errors=True)

    def namespace_stats(self, namespace: str) -> NamespaceStats:
        response = self.get(f"/v1/namespaces/{namespace}/stats")
        self._check(response, strict_errors=False)
        return _parse_body(response, NamespaceStats)

    def get_namespace_config(self, namespace: str) -> NamespaceConfig:
        response = self.get(f"/v1/namespaces/{namespace}/config")
        self._check(response, strict_errors=False)
        return _parse_body(response, NamespaceConfig)

    def set_namespace_config(self, namespace: str, config: NamespaceConfig) -> None:
        """POST a full configuration. The response body is ignored on success."""
        response = self.post(
            f"/v1/namespaces/{namespace}/config",
            json=config.model_dump(mode="json"),
        )
        self._check(response, strict_errors=False)
