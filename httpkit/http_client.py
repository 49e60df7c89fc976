"""HTTP GET/POST helpers for talking to other services."""

import time
from typing import Any, Dict, Optional

import httpx

from svcutil import config
from svcutil.exceptions import ChecksumMismatchError, TransportError
from svcutil.logging_config import get_logger
from filestore.checksum_validator import IncrementalChecksumCalculator
from httpkit.responses import MessageError

logger = get_logger(__name__)


class HttpClient:
    """Thin httpx wrapper that maps failures onto svcutil errors."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = config.HTTP_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix for relative URLs (empty for absolute URLs only)
            timeout: Request timeout in seconds
            headers: Default headers sent with every request
            transport: Custom httpx transport (used by tests)
        """
        self.session = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        logger.debug(f"Initialized HttpClient [base_url={base_url or '-'}] [timeout={timeout}]")

    def __enter__(self) -> 'HttpClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.session.close()

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        start_time = time.time()
        try:
            response = self.session.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        duration = time.time() - start_time
        logger.debug(f"{method} {url} status={response.status_code} duration={duration:.3f}s")

        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """
        Raise MessageError for non-2xx responses.

        The message is taken from a {"message": ...} body when present,
        otherwise the reason phrase is used.
        """
        if response.is_success:
            return

        message = response.reason_phrase
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            message = body["message"]

        raise MessageError(message, response.status_code)

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET url and decode the JSON body.

        Raises:
            TransportError: Connection failed or timed out
            MessageError: Server answered with a non-2xx status
        """
        return self._request("GET", url, params=params).json()

    def get_bytes(self, url: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """GET url and return the raw body."""
        return self._request("GET", url, params=params).content

    def post_json(self, url: str, payload: Any) -> Any:
        """
        POST payload as JSON and decode the JSON reply.

        Raises:
            TransportError: Connection failed or timed out
            MessageError: Server answered with a non-2xx status
        """
        return self._request("POST", url, json=payload).json()

    def post_form(
        self,
        url: str,
        data: Dict[str, str],
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """POST form fields (multipart when files are given) and decode the JSON reply."""
        return self._request("POST", url, data=data, files=files).json()

    def download_verified(self, url: str, checksum: str) -> bytes:
        """
        Download url and verify the body against a SHA-256 checksum.

        Args:
            url: Resource to download
            checksum: Expected SHA-256, lowercase hex

        Returns:
            Verified body

        Raises:
            TransportError: Connection failed mid-download
            MessageError: Server answered with a non-2xx status
            ChecksumMismatchError: Body does not match the checksum
        """
        calculator = IncrementalChecksumCalculator()
        buffer = bytearray()

        try:
            with self.session.stream("GET", url) as response:
                if not response.is_success:
                    response.read()
                    self._raise_for_status(response)
                for piece in response.iter_bytes():
                    calculator.update(piece)
                    buffer.extend(piece)
        except httpx.TransportError as e:
            logger.warning(f"Download of {url} failed after {calculator.size} bytes: {e}")
            raise TransportError(f"GET {url} failed: {e}") from e

        actual = calculator.finalize()
        if actual != checksum:
            logger.warning(f"Checksum mismatch for {url}: expected={checksum!r} actual={actual}")
            raise ChecksumMismatchError(expected=checksum, actual=actual)

        logger.debug(f"Downloaded {calculator.size} bytes from {url}")
        return bytes(buffer)
