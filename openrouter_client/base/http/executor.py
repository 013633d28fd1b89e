"""HTTP execution engine.

``HTTPExecutor`` performs a single attempt per call (no retries) with the
owned ``httpx.AsyncClient`` and turns every outcome into either a decoded
model or a classified :class:`OpenRouterError`.

Non-streaming decode is dual-path: a response with an unexpected status is
classified from its error envelope, and a response with the expected status
that nonetheless fails to decode is inspected for an embedded error envelope
whose ``code`` takes precedence over the transport status.

Streaming raises only for an unexpected status, before any fragment. Every
other failure ends the fragment sequence quietly and is recorded as a
``stream.error`` log event.
"""
from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import ErrorKind, OpenRouterError, classify_status, decode_error_body
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..streaming import FragmentStream, LineAccumulator, parse_sse_line
from .endpoint import Endpoint
from .request_builder import RequestBuilder

T = TypeVar("T", bound=BaseModel)

_logger = get_logger(__name__)

STREAM_OK_STATUS = 200


def _context(endpoint: Endpoint) -> LogContext:
    return LogContext(
        method=endpoint.method.value,
        path=endpoint.path,
        model=getattr(endpoint.body, "model", None),
    )


class HTTPExecutor:
    """Send endpoint requests and decode or classify their responses."""

    def __init__(self, http_client: httpx.AsyncClient, builder: RequestBuilder) -> None:
        self._client = http_client
        self._builder = builder

    async def execute(
        self,
        endpoint: Endpoint,
        response_type: Type[T],
        expected_status: Optional[int] = None,
    ) -> T:
        """Perform ``endpoint`` and decode the body as ``response_type``.

        Args:
            endpoint: Operation to perform.
            response_type: Pydantic model the success body decodes into.
            expected_status: Overrides ``endpoint.expected_status``.

        Raises:
            OpenRouterError: ``INVALID_URL`` / ``ENCODING`` before sending,
                ``TRANSPORT`` when no response is received, otherwise the
                kind classified from the response status or embedded error.
        """
        expected = expected_status if expected_status is not None else endpoint.expected_status
        ctx = _context(endpoint)
        request = self._builder.build(endpoint)
        log_event(_logger, "http.request", ctx, level=logging.DEBUG)
        try:
            response = await self._client.send(request)
        except httpx.TransportError as exc:
            log_event(
                _logger,
                "http.error",
                ctx,
                level=logging.WARNING,
                error_code=ErrorKind.TRANSPORT.value,
                error=type(exc).__name__,
            )
            raise OpenRouterError(
                kind=ErrorKind.TRANSPORT,
                message=str(exc) or type(exc).__name__,
                raw=exc,
            ) from exc

        log_event(_logger, "http.response", ctx, level=logging.DEBUG, status=response.status_code)
        if response.status_code != expected:
            error = classify_status(response.status_code, decode_error_body(response.content))
            self._log_error(ctx, error)
            raise error

        try:
            return response_type.model_validate_json(response.content)
        except ValidationError as exc:
            error = self._undecodable_success(response, exc)
            self._log_error(ctx, error)
            raise error from exc

    @staticmethod
    def _undecodable_success(response: httpx.Response, exc: ValidationError) -> OpenRouterError:
        """Classify a success-status body that did not match the expected type.

        Some upstream failures are reported with a success status and an
        error envelope in the body; the envelope's ``code`` is used for
        classification when present.
        """
        error_body = decode_error_body(response.content)
        status = error_body.error.code if error_body is not None else response.status_code
        error = classify_status(status, error_body)
        error.raw = exc
        return error

    @staticmethod
    def _log_error(ctx: LogContext, error: OpenRouterError) -> None:
        log_event(
            _logger,
            "http.error",
            ctx,
            level=logging.WARNING,
            status=error.status_code,
            error_code=error.kind.value,
        )

    # ---- streaming --------------------------------------------------------

    def stream(self, endpoint: Endpoint) -> FragmentStream:
        """Return the text fragments of a streaming response, in wire order.

        Nothing is sent until the stream is first iterated. A non-200 status
        raises the classified :class:`OpenRouterError` from the first
        iteration; any other failure ends the stream without raising.
        """
        return FragmentStream(self._stream_fragments(endpoint))

    async def _stream_fragments(self, endpoint: Endpoint) -> AsyncGenerator[str, None]:
        ctx = _context(endpoint)
        try:
            request = self._builder.build(endpoint)
            log_event(_logger, "stream.start", ctx, level=logging.DEBUG)
            response = await self._client.send(request, stream=True)
        except Exception as exc:  # noqa: BLE001 - stream failures end the sequence
            self._log_stream_failure(ctx, exc, emitted=0)
            return

        try:
            log_event(_logger, "http.response", ctx, level=logging.DEBUG, status=response.status_code)
            if response.status_code != STREAM_OK_STATUS:
                error = await self._stream_status_error(response)
                self._log_error(ctx, error)
                raise error

            accumulator = LineAccumulator()
            emitted = 0
            try:
                async for text in response.aiter_text():
                    for line in accumulator.feed(text):
                        fragment = parse_sse_line(line)
                        if fragment is None:
                            continue
                        emitted += 1
                        yield fragment
            except Exception as exc:  # noqa: BLE001 - stream failures end the sequence
                self._log_stream_failure(ctx, exc, emitted=emitted)
                return
            log_event(_logger, "stream.end", ctx, level=logging.DEBUG, emitted=emitted)
        finally:
            await response.aclose()

    @staticmethod
    async def _stream_status_error(response: httpx.Response) -> OpenRouterError:
        try:
            content = await response.aread()
        except httpx.TransportError:
            content = b""
        return classify_status(response.status_code, decode_error_body(content))

    @staticmethod
    def _log_stream_failure(ctx: LogContext, exc: BaseException, emitted: int) -> None:
        log_event(
            _logger,
            "stream.error",
            ctx,
            level=logging.WARNING,
            error_code=ErrorKind.STREAMING_FAILURE.value,
            error=type(exc).__name__,
            detail=str(exc)[:260],
            emitted=emitted,
        )


__all__ = ["HTTPExecutor", "STREAM_OK_STATUS"]
