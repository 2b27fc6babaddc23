"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

HTTP transport for the SendOwl REST API.

Wraps a single ``httpx.AsyncClient`` that carries Basic credentials and JSON
content negotiation on every request. Request bodies are encoded with the
lower-case ``JsonCodec``; nested-resource submissions go through the
``MultipartBuilder``. Any status outside 200-299 is raised as
``HttpStatusError`` with the raw body attached; nothing is retried.
"""

from __future__ import annotations

import base64
import secrets
import time
from dataclasses import dataclass
from types import TracebackType
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

import httpx

from sendowl.exceptions import (
    HttpStatusError,
    NetworkError,
    ResourceDisposedError,
    SDKConfigurationError,
    SerializationError,
)
from sendowl.logging_config import get_logger, log_http_exchange
from sendowl.sdk.codec import JsonCodec
from sendowl.sdk.multipart import Attachment, FormField, MultipartBuilder

if TYPE_CHECKING:
    from sendowl.config.settings import SendOwlConfig

logger = get_logger(__name__)

T = TypeVar("T")
TResult = TypeVar("TResult")

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Credentials:
    """API key and secret pair."""
    api_key: str
    api_secret: str

    def basic_token(self) -> str:
        """``base64(api_key:api_secret)`` as sent in the Authorization header."""
        raw = f"{self.api_key}:{self.api_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def __repr__(self) -> str:
        return f"Credentials(api_key={self.api_key!r}, api_secret='***')"


class TransportClient:
    """Async JSON/multipart transport shared by the resource clients.

    One instance owns one connection pool and may serve any number of
    concurrent requests. Close it once when done, or use it as an async
    context manager::

        async with TransportClient(base_url, Credentials(key, secret)) as client:
            product = await client.fetch("products/1", Product)

    Args:
        base_url: Root URL of the API (e.g. ``https://www.sendowl.com/api/v1``).
        credentials: API key and secret for Basic authentication.
        timeout: Request timeout in seconds.
        codec: JSON codec. Defaults to a lower-case ``JsonCodec``.
        builder: Multipart builder. Defaults to one sharing the codec's policy.
        transport: Optional ``httpx`` transport (mock transports in tests).
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        timeout: float = 30.0,
        codec: Optional[JsonCodec] = None,
        builder: Optional[MultipartBuilder] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise SDKConfigurationError("base_url is required")
        if not credentials.api_key:
            raise SDKConfigurationError("api_key is required")

        # Trailing slash so relative paths resolve under the API root.
        self._base_url = base_url.rstrip("/") + "/"
        self._codec = codec or JsonCodec()
        self._builder = builder or MultipartBuilder(self._codec.policy)
        self._auth_header = f"Basic {credentials.basic_token()}"

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": self._auth_header,
                "Accept": JSON_CONTENT_TYPE,
                "Accept-Encoding": "gzip, deflate",
            },
            timeout=timeout,
            transport=transport,
        )
        self._closed = False
        logger.info("TransportClient initialized", base_url=self._base_url)

    @classmethod
    def from_config(
        cls,
        config: SendOwlConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> TransportClient:
        """Build a client from the ``api`` section of a loaded configuration."""
        return cls(
            base_url=config.api.base_url,
            credentials=Credentials(config.api.api_key, config.api.api_secret),
            timeout=config.api.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def closed(self) -> bool:
        return self._closed

    # -- Operations --------------------------------------------------------

    async def fetch(self, path: str, result_type: Type[T]) -> T:
        """GET ``path`` and decode the body as ``result_type``."""
        response = await self._send("GET", path)
        return self._codec.decode(response.content, result_type)

    async def create(
        self,
        path: str,
        body: T,
        result_type: Optional[Type[T]] = None,
    ) -> T:
        """POST ``body`` as JSON and decode the created resource.

        ``result_type`` defaults to the type of ``body``.
        """
        response = await self._send("POST", path, json_text=self._codec.encode(body))
        return self._codec.decode(response.content, result_type or type(body))

    async def replace(self, path: str, body: Any) -> None:
        """PUT ``body`` as JSON; the response body is discarded."""
        await self._send("PUT", path, json_text=self._codec.encode(body))

    async def remove(self, path: str) -> None:
        """DELETE ``path``."""
        await self._send("DELETE", path)

    async def submit_form(
        self,
        path: str,
        obj: Any,
        resource_name: str,
        result_type: Type[TResult],
        attachment: Optional[Attachment] = None,
    ) -> TResult:
        """POST ``obj`` as ``multipart/form-data`` under ``resource_name``.

        Args:
            path: Path relative to the base URL.
            obj: Payload whose own fields become ``resource_name[field]`` parts.
            resource_name: Name the fields are nested under.
            result_type: Type the JSON response is decoded into.
            attachment: Optional file sent as ``resource_name[field_name]``.
        """
        fields = self._builder.build(obj, resource_name, attachment)
        response = await self._send("POST", path, files=FormField.to_httpx(fields))
        return self._codec.decode(response.content, result_type)

    # -- Plumbing ----------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        json_text: Optional[str] = None,
        files: Optional[list] = None,
    ) -> httpx.Response:
        if self._closed:
            raise ResourceDisposedError(
                f"Cannot {method} {path}: TransportClient is closed"
            )

        headers = {}
        content = None
        if json_text is not None:
            headers["Content-Type"] = f"{JSON_CONTENT_TYPE}; charset=utf-8"
            content = json_text.encode("utf-8")
        elif files is not None and not files:
            # httpx only writes a multipart body when there is at least one part
            boundary = secrets.token_hex(16)
            headers["Content-Type"] = f"multipart/form-data; boundary={boundary}"
            content = f"--{boundary}--\r\n".encode("ascii")

        start = time.monotonic()
        try:
            response = await self._client.request(
                method,
                path,
                content=content,
                files=files or None,
                headers=headers,
            )
        except httpx.DecodingError as e:
            raise SerializationError(
                f"{method} {path}: response body could not be decompressed: {e}"
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e
        elapsed = (time.monotonic() - start) * 1000

        log_http_exchange(
            logger,
            method=method,
            path=path,
            status_code=response.status_code,
            duration_ms=round(elapsed, 2),
        )

        if not response.is_success:
            raise HttpStatusError(
                response.status_code,
                response.text,
                method=method,
                url=str(response.request.url),
            )
        return response

    # -- Lifecycle ---------------------------------------------------------

    async def close(self) -> None:
        """Release the connection pool. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._client.aclose()
        logger.debug("TransportClient closed")

    async def __aenter__(self) -> TransportClient:
        if self._closed:
            raise ResourceDisposedError("TransportClient is closed")
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()
