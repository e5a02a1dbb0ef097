"""
HTTP client for the Notaire API.

Separates transport failures (TransportError) from API errors
(ApiError). A verification that does not recover a signer is a normal
return value, not an exception.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class NotaireClientError(Exception):
    """Base class for client errors."""


class TransportError(NotaireClientError):
    """Raised when the API could not be reached."""


class ApiError(NotaireClientError):
    """
    Raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code
        code: Error code from the response envelope
        message: Error message from the response envelope
    """

    def __init__(self, status: int, code: str, message: str):
        self.status = status
        self.code = code
        self.message = message
        super().__init__(f"{status} {code}: {message}")


class NotaireClient:
    """
    Synchronous HTTP client for the Notaire API.

    Examples:
        with NotaireClient("http://localhost:3000") as client:
            result = client.verify_signature("hello", "0x...")
            if result["isValid"]:
                print(result["signer"])
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            base_url: API base URL (e.g., "http://localhost:3000")
            token: Optional bearer token
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (for testing)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "NotaireClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {self.base_url} timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Failed to connect to {self.base_url}: {e}"
            ) from e

        if response.is_success:
            return response.json()

        code = "HTTP_ERROR"
        message = response.reason_phrase or "Request failed"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            code = body.get("error") or code
            message = body.get("message") or message

        logger.debug(f"{method} {path} failed: {response.status_code} {code}")
        raise ApiError(response.status_code, code, message)

    def verify_signature(self, message: str, signature: str) -> Dict[str, Any]:
        """
        Verify a signed message.

        Returns:
            Response body with isValid, signer, originalMessage, timestamp
            and error (on failure)

        Raises:
            TransportError: If the API is unreachable
            ApiError: If the request is rejected
        """
        return self._request(
            "POST",
            "/api/verify-signature",
            json={"message": message, "signature": signature},
        )

    def health(self) -> Dict[str, Any]:
        """Basic health check."""
        return self._request("GET", "/api/health")

    def get_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Server-side history of the token identity, newest first."""
        params = {"limit": limit} if limit is not None else None
        body = self._request("GET", "/api/signatures", params=params)
        return body["items"]

    def clear_history(self) -> int:
        """Clear server-side history. Returns number of removed records."""
        body = self._request("DELETE", "/api/signatures")
        return body["removed"]
