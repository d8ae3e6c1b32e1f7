from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.exceptions import BaseAPIException
from app.core.handlers import register_exception_handlers


def test_validation_error_envelope(client):
    r = client.put("/student/1", json={"age": "not a number"})

    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "age" in body["error"]["details"]


def test_bad_path_parameter(client):
    r = client.get("/student/abc")

    assert r.status_code == 422
    assert "path.student_id" in r.json()["error"]["details"]


def test_unknown_route_uses_http_error_envelope(client):
    r = client.get("/teachers")

    assert r.status_code == 404
    assert r.json()["error"] == {"code": "HTTP_ERROR", "message": "Not Found", "details": None}


def _app_raising(exc):
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise exc

    return app


class ConflictException(BaseAPIException):
    def __init__(self, message, details=None):
        super().__init__(message=message, code="CONFLICT", status_code=409, details=details)


def test_custom_exception_envelope():
    client = TestClient(_app_raising(ConflictException("Bad id", details={"id": "x"})))

    r = client.get("/boom")

    assert r.status_code == 409
    assert r.json() == {
        "success": False,
        "error": {"code": "CONFLICT", "message": "Bad id", "details": {"id": "x"}},
    }


def test_unhandled_exception_becomes_500(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)
    client = TestClient(_app_raising(RuntimeError("database went away")), raise_server_exceptions=False)

    r = client.get("/boom")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert r.json()["error"]["details"] is None
