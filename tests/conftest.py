"""
Pytest configuration and shared fixtures for span status tests.
"""
import json
import pytest


def make_attributes(**kwargs):
    """Helper to create OpenTelemetry-format attributes."""
    attributes = []
    for key, value in kwargs.items():
        if isinstance(value, int):
            attributes.append({"key": key, "value": {"intValue": value}})
        else:
            attributes.append({"key": key, "value": {"stringValue": value}})
    return attributes


def make_span(kind="SPAN_KIND_SERVER", status_code=None, recorded="STATUS_CODE_UNSET",
              exception=None, name="GET /api/users", span_id="span1", **attributes):
    """Helper to create an OTLP JSON span with HTTP attributes."""
    attrs = {"http.method": "GET"}
    if status_code is not None:
        attrs["http.response.status_code"] = status_code
    attrs.update(attributes)
    span = {
        "traceId": "trace-001",
        "spanId": span_id,
        "name": name,
        "kind": kind,
        "attributes": make_attributes(**attrs),
        "status": {"code": recorded},
    }
    if exception:
        span["events"] = [{
            "name": "exception",
            "attributes": make_attributes(**{
                "exception.type": exception[0],
                "exception.message": exception[1],
            }),
        }]
    return span


class StubGetter:
    """Status code getter returning a fixed code and recording its calls."""

    def __init__(self, status_code=None):
        self.status_code = status_code
        self.calls = []

    def get_http_response_status_code(self, request, response, error):
        self.calls.append((request, response, error))
        return self.status_code


@pytest.fixture
def stub_getter():
    return StubGetter


@pytest.fixture
def span_factory():
    return make_span


@pytest.fixture
def sample_trace_data():
    """Trace export with one mismatching span of each HTTP kind."""
    return {
        "batches": [
            {
                "resource": {
                    "attributes": [
                        {"key": "service.name", "value": {"stringValue": "user-service"}}
                    ]
                },
                "instrumentationLibrarySpans": [
                    {
                        "spans": [
                            # 404 on the server is the caller's fault but was recorded as ERROR
                            make_span("SPAN_KIND_SERVER", 404, "STATUS_CODE_ERROR",
                                      name="GET /api/users/{id}", span_id="srv404"),
                            # 503 on the server recorded correctly
                            make_span("SPAN_KIND_SERVER", 503, "STATUS_CODE_ERROR",
                                      name="GET /api/health", span_id="srv503"),
                            # 404 seen by the client was left UNSET
                            make_span("SPAN_KIND_CLIENT", 404, "STATUS_CODE_UNSET",
                                      name="HTTP GET", span_id="cli404",
                                      **{"http.url": "http://profile-service/api/profile/1"}),
                            # successful call recorded as OK
                            make_span("SPAN_KIND_CLIENT", 200, "STATUS_CODE_OK",
                                      name="HTTP GET", span_id="cli200"),
                            # not an HTTP span
                            {
                                "traceId": "trace-001",
                                "spanId": "db1",
                                "name": "SELECT users",
                                "kind": "SPAN_KIND_CLIENT",
                                "attributes": make_attributes(**{"db.system": "postgresql"}),
                                "status": {"code": "STATUS_CODE_ERROR"},
                            },
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def sample_trace_file(tmp_path, sample_trace_data):
    """Write the sample trace to a temporary file and return its path."""
    path = tmp_path / "trace.json"
    path.write_text(json.dumps(sample_trace_data))
    return str(path)
