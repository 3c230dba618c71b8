"""
Integration tests driving the full application against in-memory SQLite.
"""

import pytest

from ems.db.base import Employee as DbEmployee
from ems.db.session import SessionLocal

BASE = "/api/v1/employees"


def _count_rows(email: str) -> int:
    db = SessionLocal()
    try:
        return db.query(DbEmployee).filter_by(email=email).count()
    finally:
        db.close()


def _stored_email(employee_id: int) -> str:
    db = SessionLocal()
    try:
        return db.query(DbEmployee).filter_by(id=employee_id).one().email
    finally:
        db.close()


@pytest.mark.api
@pytest.mark.employee
class TestEmployeeLifecycle:
    def test_full_lifecycle(self, client, john_doe_payload):
        created = client.post(BASE, json=john_doe_payload)
        assert created.status_code == 201
        assert created.get_json() == {
            "firstName": "John",
            "lastName": "Doe",
            "departmentCode": "Compro",
        }

        duplicate = client.post(BASE, json=john_doe_payload)
        assert duplicate.status_code == 400
        assert _count_rows("john@doe.com") == 1

        patched = client.patch(
            f"{BASE}/john@doe.com",
            json={"lastName": "McIntier", "departmentCode": "Medicine"},
        )
        assert patched.status_code == 200
        assert patched.get_json() == {
            "firstName": "John",
            "lastName": "McIntier",
            "departmentCode": "Medicine",
        }

        deleted = client.delete(f"{BASE}/john@doe.com")
        assert deleted.status_code == 204

        assert client.get(f"{BASE}/john@doe.com").status_code == 404

    def test_created_employee_is_findable(self, client, john_doe_payload):
        client.post(BASE, json=john_doe_payload)

        found = client.get(f"{BASE}/john@doe.com")

        assert found.status_code == 200
        assert found.get_json()["firstName"] == "John"

    def test_delete_twice_is_not_found(self, client, john_doe_payload):
        client.post(BASE, json=john_doe_payload)
        assert client.delete(f"{BASE}/john@doe.com").status_code == 204

        again = client.delete(f"{BASE}/john@doe.com")
        never = client.delete(f"{BASE}/never@x.com")

        assert again.status_code == never.status_code == 404

    def test_put_path_email_wins(self, client, john_doe_payload):
        john_doe_payload["email"] = "a@x.com"
        client.post(BASE, json=john_doe_payload)

        body = dict(john_doe_payload, email="b@y.com", firstName="Jane")
        response = client.put(f"{BASE}/a@x.com", json=body)

        assert response.status_code == 200
        assert response.get_json()["firstName"] == "Jane"
        assert _count_rows("a@x.com") == 1
        assert _count_rows("b@y.com") == 0

    def test_patch_without_fields_keeps_row(self, client, john_doe_payload):
        client.post(BASE, json=john_doe_payload)
        db = SessionLocal()
        try:
            employee_id = db.query(DbEmployee).one().id
        finally:
            db.close()

        response = client.patch(f"{BASE}/john@doe.com", json={})

        assert response.status_code == 200
        assert response.get_json() == {
            "firstName": "John",
            "lastName": "Doe",
            "departmentCode": "Compro",
        }
        assert _stored_email(employee_id) == "john@doe.com"

    def test_search_ignores_case(self, client, john_doe_payload):
        client.post(BASE, json=john_doe_payload)
        client.post(
            BASE,
            json={
                "firstName": "Ann",
                "lastName": "Lee",
                "email": "ann@lee.com",
                "departmentCode": "Medicine",
            },
        )

        by_dept = client.get(f"{BASE}/search", query_string={"departmentCode": "COMPRO"})
        by_last = client.get(f"{BASE}/search", query_string={"lastName": "lee"})

        assert [e["firstName"] for e in by_dept.get_json()] == ["John"]
        assert [e["firstName"] for e in by_last.get_json()] == ["Ann"]
        assert len(client.get(BASE).get_json()) == 2

    def test_update_unknown_email_returns_404(self, client, john_doe_payload):
        response = client.put(f"{BASE}/ghost@x.com", json=john_doe_payload)

        assert response.status_code == 404
        assert response.get_json()["path"] == f"{BASE}/ghost@x.com"


@pytest.mark.api
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
