"""
Integration tests for server-side status extraction in a Flask application.
"""
import pytest
from flask import Flask, abort, g, request
from opentelemetry.trace import StatusCode

from span_status import HttpSpanStatusExtractor, RecordingSpanStatusBuilder
from span_status.integrations.wsgi import WerkzeugStatusCodeGetter


@pytest.fixture
def app_and_statuses():
    """Flask app recording the computed status of every handled request."""
    app = Flask(__name__)
    extractor = HttpSpanStatusExtractor.create_server(WerkzeugStatusCodeGetter())
    statuses = []

    @app.route("/users/<int:user_id>")
    def get_user(user_id):
        if user_id == 0:
            abort(404)
        return {"id": user_id}

    @app.route("/crash")
    def crash():
        raise RuntimeError("handler failed")

    @app.route("/unavailable")
    def unavailable():
        return "try later", 503

    @app.after_request
    def record_status(response):
        g.response = response
        return response

    @app.teardown_request
    def extract_status(error):
        builder = RecordingSpanStatusBuilder()
        extractor.extract(builder, request, g.get("response"), error)
        statuses.append(builder.status_code)

    return app, statuses


class TestFlaskServerStatus:
    """SERVER extractor behaviour behind a real WSGI application."""

    def test_success_is_unset(self, app_and_statuses):
        """Test that a 200 response stays UNSET."""
        app, statuses = app_and_statuses
        assert app.test_client().get("/users/7").status_code == 200
        assert statuses == [StatusCode.UNSET]

    def test_not_found_is_not_a_server_error(self, app_and_statuses):
        """Test that a 404 response stays UNSET on the server."""
        app, statuses = app_and_statuses
        assert app.test_client().get("/users/0").status_code == 404
        assert statuses == [StatusCode.UNSET]

    def test_503_is_error(self, app_and_statuses):
        """Test that a 503 response is ERROR."""
        app, statuses = app_and_statuses
        assert app.test_client().get("/unavailable").status_code == 503
        assert statuses == [StatusCode.ERROR]

    def test_unhandled_exception_is_error(self, app_and_statuses):
        """Test that an unhandled exception is ERROR."""
        app, statuses = app_and_statuses
        assert app.test_client().get("/crash").status_code == 500
        assert statuses == [StatusCode.ERROR]
