"""
Tests for the render dispatcher, error payloads and the sanitizing responder.

Extra routes are attached to a fresh application to drive each path.
"""

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from catalog.infrastructure.catalog.fixtures import PRODUCT_FIXTURES
from catalog.interfaces.catalog.context_loader import current_product
from catalog.interfaces.catalog.schemas import (
    ProductResponse,
    new_product_list_response,
)
from catalog.shared.context import set_status
from catalog.shared.errors.payloads import ERR_NOT_FOUND, ErrResponse, err_render
from catalog.shared.logging import RequestIdFilter
from catalog.shared.middleware import SECURE_HEADERS
from catalog.shared.render import render_many, render_one
from catalog.shared.renderer import RenderError
from catalog.shared.responder import respond

SECRET = "dsn=postgres://admin:hunter2@db"


@pytest.fixture
def app(app: FastAPI) -> FastAPI:
    @app.get("/_test/manufactured")
    def manufactured(request: Request):
        return respond(request, RuntimeError(SECRET))

    @app.get("/_test/manufactured-with-status")
    def manufactured_with_status(request: Request):
        set_status(request, 503)
        return respond(request, RuntimeError(SECRET))

    @app.get("/_test/double-render")
    def double_render(request: Request):
        payload = ProductResponse.from_entity(PRODUCT_FIXTURES[0])
        payload.render(request)
        return render_one(request, payload)

    @app.get("/_test/list-with-broken-item")
    def list_with_broken_item(request: Request):
        payloads = new_product_list_response(PRODUCT_FIXTURES)
        payloads[1].render(request)
        return render_many(request, payloads)

    @app.get("/_test/raw-dict")
    def raw_dict(request: Request):
        return render_one(request, {"secret": SECRET})

    @app.get("/_test/list-with-raw-dict")
    def list_with_raw_dict(request: Request):
        payloads = new_product_list_response(PRODUCT_FIXTURES)
        return render_many(request, [*payloads, {"secret": SECRET}])

    @app.get("/_test/empty-list")
    def empty_list(request: Request):
        return render_many(request, [])

    @app.get("/_test/app-code")
    def app_code(request: Request):
        return render_one(
            request,
            ErrResponse(http_status_code=409, status_text="Conflict.", app_code=4091),
        )

    @app.get("/_test/crash")
    def crash(request: Request):
        raise RuntimeError(SECRET)

    @app.get("/_test/missing-context")
    def missing_context(request: Request):
        return render_one(request, ProductResponse.from_entity(current_product(request)))

    return app


class TestErrResponse:
    """Tests for the error payload model."""

    def test_not_found_body(self) -> None:
        """Only the status text is serialized for the shared Not-Found payload."""
        assert ERR_NOT_FOUND.payload() == {"status": "Resource not found."}
        assert ERR_NOT_FOUND.http_status_code == 404

    def test_render_failure_body_hides_cause_object(self) -> None:
        """The cause is kept on the payload but never serialized."""
        cause = RenderError("boom")
        payload = err_render(cause)
        assert payload.err is cause
        assert payload.http_status_code == 422
        assert payload.payload() == {"status": "Error rendering response.", "error": "boom"}


class TestRenderOne:
    """Tests for render_one."""

    def test_failed_hook_becomes_422(self, client: TestClient) -> None:
        """A render hook that raises is replaced by the render-failure payload."""
        response = client.get("/_test/double-render")
        assert response.status_code == 422
        assert response.json() == {
            "status": "Error rendering response.",
            "error": "product '1' response already rendered",
        }

    def test_app_code_is_serialized_as_code(self, client: TestClient) -> None:
        """Optional application codes appear under 'code'."""
        response = client.get("/_test/app-code")
        assert response.status_code == 409
        assert response.json() == {"status": "Conflict.", "code": 4091}

    def test_value_without_render_hook_is_refused(self, client: TestClient) -> None:
        """A plain dict is never emitted as-is."""
        response = client.get("/_test/raw-dict")
        assert response.status_code == 422
        assert response.json() == {
            "status": "Error rendering response.",
            "error": "dict is not renderable",
        }
        assert "hunter2" not in response.text


class TestRenderMany:
    """Tests for render_many."""

    def test_empty_input_is_empty_array(self, client: TestClient) -> None:
        """No values renders as [] with 200."""
        response = client.get("/_test/empty-list")
        assert response.status_code == 200
        assert response.json() == []

    def test_one_failed_hook_fails_the_list(self, client: TestClient) -> None:
        """A single failing element turns the whole response into a 422."""
        response = client.get("/_test/list-with-broken-item")
        assert response.status_code == 422
        assert response.json()["status"] == "Error rendering response."

    def test_element_without_render_hook_fails_the_list(self, client: TestClient) -> None:
        """A plain dict among rendered products fails the whole list."""
        response = client.get("/_test/list-with-raw-dict")
        assert response.status_code == 422
        assert response.json()["status"] == "Error rendering response."
        assert "hunter2" not in response.text


class TestSanitizingResponder:
    """Tests for error values reaching the responder directly."""

    def test_manufactured_error_is_sanitized(self, client: TestClient) -> None:
        """An unrendered error surfaces only as {"status": "error"} with 400."""
        response = client.get("/_test/manufactured")
        assert response.status_code == 400
        assert response.json() == {"status": "error"}
        assert "hunter2" not in response.text

    def test_preset_status_is_kept(self, client: TestClient) -> None:
        """An already-set status is not overridden by the default."""
        response = client.get("/_test/manufactured-with-status")
        assert response.status_code == 503
        assert response.json() == {"status": "error"}

    def test_cause_is_logged(self, client: TestClient, caplog) -> None:
        """The cause is logged for operators."""
        with caplog.at_level(logging.ERROR, logger="catalog.shared.responder"):
            client.get("/_test/manufactured")
        assert SECRET in caplog.text

    def test_default_status_comes_from_settings(self, settings) -> None:
        """The fallback status is configurable."""
        from catalog.main import create_app

        app = create_app(settings=settings.model_copy(update={"default_error_status": 418}))

        @app.get("/_test/manufactured")
        def manufactured(request: Request):
            return respond(request, ValueError(SECRET))

        response = TestClient(app).get("/_test/manufactured")
        assert response.status_code == 418
        assert response.json() == {"status": "error"}


class TestRecoverer:
    """Tests for exceptions escaping a handler."""

    def test_unhandled_exception_is_sanitized_500(self, app: FastAPI) -> None:
        """A crash is reported as 500 without the cause."""
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/_test/crash")
        assert response.status_code == 500
        assert response.json() == {"status": "error"}
        assert "hunter2" not in response.text

    def test_missing_context_is_a_server_error(self, app: FastAPI) -> None:
        """A handler reading a product no loader bound is a 500, not a 404."""
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/_test/missing-context")
        assert response.status_code == 500
        assert response.json() == {"status": "error"}

    def test_crash_is_logged_once(self, app: FastAPI, caplog) -> None:
        """A crash produces a single ERROR record, with the traceback attached."""
        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level(logging.ERROR):
            client.get("/_test/crash")
        errors = [
            record
            for record in caplog.records
            if record.levelno >= logging.ERROR and record.name.startswith("catalog")
        ]
        assert len(errors) == 1
        assert errors[0].exc_info is not None

    def test_crash_keeps_request_id_and_security_headers(
        self, app: FastAPI, caplog
    ) -> None:
        """The 500 response carries the same headers as any other response."""
        caplog.handler.addFilter(RequestIdFilter())
        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level(logging.ERROR):
            response = client.get("/_test/crash", headers={"X-Request-ID": "trace-500"})
        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "trace-500"
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value
        sanitized = [r for r in caplog.records if r.name == "catalog.shared.responder"]
        assert [r.request_id for r in sanitized] == ["trace-500"]
