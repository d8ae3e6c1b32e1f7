import pytest

from app.core.config import settings


def _create(client, **fields):
    r = client.post("/student", json=fields)
    assert r.status_code == 200
    return r.json()


def test_hello(client):
    r = client.get("/hello")
    assert r.status_code == 200
    assert r.text == "hello world"


def test_create_and_get_student(client):
    created = _create(client, name="Alice", email="alice@example.com", age=30, grade="12A1")

    assert created["id"] is not None
    r = client.get(f"/student/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_create_partial_student(client):
    created = _create(client, name="Bob")

    assert created == {"id": created["id"], "name": "Bob", "email": None, "age": None, "grade": None}


def test_list_students(client):
    assert client.get("/students").json() == []

    _create(client, name="A")
    _create(client, name="B")

    r = client.get("/students")
    assert r.status_code == 200
    assert sorted(s["name"] for s in r.json()) == ["A", "B"]


def test_get_missing_student_returns_null(client):
    r = client.get("/student/123")
    assert r.status_code == 200
    assert r.json() is None


def test_update_merges_non_null_fields(client):
    created = _create(client, name="Alice", email="alice@example.com", age=30, grade="12A1")

    r = client.put(f"/student/{created['id']}", json={"name": "Alicia", "age": None})

    assert r.status_code == 200
    assert r.json() == {**created, "name": "Alicia"}
    assert client.get(f"/student/{created['id']}").json()["name"] == "Alicia"


def test_update_with_zero_value_overwrites(client):
    created = _create(client, name="Carol", age=19)

    r = client.put(f"/student/{created['id']}", json={"age": 0})

    assert r.json()["age"] == 0
    assert r.json()["name"] == "Carol"


def test_update_can_overwrite_id(client):
    created = _create(client, name="Dave")

    r = client.put(f"/student/{created['id']}", json={"id": 500})

    assert r.json() == {**created, "id": 500}
    assert client.get("/student/500").json()["name"] == "Dave"
    assert client.get(f"/student/{created['id']}").json() is None


def test_update_missing_student_returns_null(client):
    r = client.put("/student/321", json={"name": "Ghost"})
    assert r.status_code == 200
    assert r.json() is None
    assert client.get("/students").json() == []


def test_delete_student(client):
    created = _create(client, name="Eve")

    r = client.delete(f"/student/{created['id']}")

    assert r.status_code == 200
    assert r.text == "student has been deleted"
    assert client.get(f"/student/{created['id']}").json() is None


def test_delete_missing_student_still_confirms(client):
    r = client.delete("/student/999")
    assert r.status_code == 200
    assert r.text == "student has been deleted"


@pytest.fixture
def strict_not_found(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_NOT_FOUND", True)


def test_strict_mode_get_missing_is_404(client, strict_not_found):
    r = client.get("/student/123")

    assert r.status_code == 404
    assert r.json() == {
        "success": False,
        "error": {"code": "NOT_FOUND", "message": "Student not found", "details": {"id": 123}},
    }


def test_strict_mode_put_missing_is_404(client, strict_not_found):
    r = client.put("/student/123", json={"name": "Ghost"})
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_strict_mode_existing_student_unaffected(client, strict_not_found):
    created = _create(client, name="Frank")
    assert client.get(f"/student/{created['id']}").json()["name"] == "Frank"


def test_strict_mode_delete_missing_still_confirms(client, strict_not_found):
    r = client.delete("/student/999")
    assert r.status_code == 200
    assert r.text == "student has been deleted"


def test_post_with_existing_id_replaces_row(client):
    _create(client, id=5, name="Dave", email="d@x", age=20, grade="12A1")

    replaced = _create(client, id=5, name="David")

    assert replaced == {"id": 5, "name": "David", "email": None, "age": None, "grade": None}
    assert client.get("/student/5").json() == replaced
    assert len(client.get("/students").json()) == 1


def test_post_without_id_after_explicit_id(client):
    _create(client, id=1, name="Explicit")

    generated = _create(client, name="Generated")

    assert generated["id"] != 1
    assert len(client.get("/students").json()) == 2


def test_update_id_to_taken_id_fails_and_keeps_rows(lenient_client):
    first = _create(lenient_client, name="Alice", age=30)
    second = _create(lenient_client, name="Bob", age=25)

    r = lenient_client.put(f"/student/{first['id']}", json={"id": second["id"], "name": "Clash"})

    assert r.status_code == 500
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert lenient_client.get(f"/student/{first['id']}").json() == first
    assert lenient_client.get(f"/student/{second['id']}").json() == second
