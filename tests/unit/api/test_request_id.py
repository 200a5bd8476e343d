"""Tests for the request ID middleware and logging filter."""

from __future__ import annotations

import logging
import uuid

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from creatorkit.api.middleware import (
    RequestIdFilter,
    RequestIdMiddleware,
    get_request_id,
)
from creatorkit.api.middleware.request_id import (
    MAX_REQUEST_ID_LENGTH,
    _sanitize_request_id,
    request_id_var,
)


def _is_uuid4(value: str) -> bool:
    try:
        return uuid.UUID(value).version == 4
    except ValueError:
        return False


class TestSanitizeRequestId:
    """Tests for header value sanitisation."""

    def test_valid_value_kept(self) -> None:
        assert _sanitize_request_id("req-123_abc") == "req-123_abc"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value_generates_uuid(self, value: str | None) -> None:
        assert _is_uuid4(_sanitize_request_id(value))

    @pytest.mark.parametrize("value", ["has space", "tab\there", "café"])
    def test_unprintable_value_replaced(self, value: str) -> None:
        result = _sanitize_request_id(value)

        assert result != value
        assert _is_uuid4(result)

    def test_long_value_truncated(self) -> None:
        value = "a" * (MAX_REQUEST_ID_LENGTH + 50)

        assert _sanitize_request_id(value) == "a" * MAX_REQUEST_ID_LENGTH


class TestRequestIdMiddleware:
    """Tests for propagation through the request."""

    @pytest.fixture
    def app(self) -> FastAPI:
        app = FastAPI()
        app.add_middleware(RequestIdMiddleware)

        @app.get("/echo")
        async def echo(request: Request) -> dict[str, str]:
            return {"state": request.state.request_id, "context": get_request_id()}

        return app

    async def test_incoming_id_propagated(self, app: FastAPI) -> None:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/echo", headers={"X-Request-ID": "trace-1"})

        assert response.headers["X-Request-ID"] == "trace-1"
        assert response.json() == {"state": "trace-1", "context": "trace-1"}

    async def test_id_generated_when_missing(self, app: FastAPI) -> None:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/echo")

        generated = response.headers["X-Request-ID"]
        assert _is_uuid4(generated)
        assert response.json()["context"] == generated

    async def test_context_reset_after_request(self, app: FastAPI) -> None:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.get("/echo", headers={"X-Request-ID": "trace-2"})

        assert get_request_id() == ""


class TestRequestIdFilter:
    """Tests for the logging filter."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("creatorkit", logging.INFO, __file__, 1, "msg", None, None)

    def test_placeholder_outside_request(self) -> None:
        record = self._record()

        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "-"  # type: ignore[attr-defined]

    def test_current_id_inside_request(self) -> None:
        token = request_id_var.set("trace-3")
        try:
            record = self._record()
            RequestIdFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert record.request_id == "trace-3"  # type: ignore[attr-defined]
