# tests/api/test_sales_endpoints.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from dealership.api.endpoints.errors import to_http_exception
from dealership.core.config import settings
from dealership.core.exceptions import DealershipException, ValidationException
from dealership.db.session import get_db
from dealership.main import app
from dealership.repositories.audit_repository import AuditLogRepository

SALES_URL = f"{settings.API_V1_STR}/sales/"


@pytest.fixture()
def client(session_factory, seeded):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def payload():
    return {
        "customer_id": 1,
        "vehicle_id": 1,
        "salesperson_id": 1,
        "sale_price": "19500.00",
        "sale_date": "2025-01-15",
        "maintenance_date": "2025-06-01",
        "maintenance_description": "Oil and Filter Change",
        "maintenance_cost": "100.00",
    }


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["database"] == "connected"


def test_health_check_reports_unavailable_database(client, monkeypatch):
    monkeypatch.setattr("dealership.main.verify_db_connection", lambda db_engine=None: False)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["database"] == "unavailable"


def test_record_sale_returns_created(client, payload):
    response = client.post(SALES_URL, json=payload)

    assert response.status_code == 201
    sale_id = response.json()["sale_id"]

    fetched = client.get(f"{SALES_URL}{sale_id}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body["vehicle_id"] == 1
    assert body["sale_date"] == "2025-01-15"


def test_selling_sold_vehicle_is_a_conflict(client, payload):
    assert client.post(SALES_URL, json=payload).status_code == 201

    response = client.post(SALES_URL, json=payload)

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["code"] == "VALIDATION_003"
    assert detail["category"] == "validation"


def test_unknown_customer_is_not_found(client, payload):
    response = client.post(SALES_URL, json={**payload, "customer_id": 999})

    assert response.status_code == 404
    detail = response.json()["detail"]
    assert detail["code"] == "VALIDATION_002"
    assert detail["details"]["entity_type"] == "Customer"


@pytest.mark.parametrize(
    "field, value",
    [
        ("customer_id", "abc"),
        ("sale_price", "-5.00"),
        ("sale_price", "19500.001"),
        ("sale_date", "not-a-date"),
        ("maintenance_description", "   "),
    ],
)
def test_malformed_body_is_rejected(client, payload, field, value):
    response = client.post(SALES_URL, json={**payload, field: value})
    assert response.status_code == 422


def test_missing_sale_is_not_found(client):
    response = client.get(f"{SALES_URL}12345")
    assert response.status_code == 404


def test_salesperson_statistics(client, payload):
    client.post(SALES_URL, json=payload)

    response = client.get(f"{settings.API_V1_STR}/salespersons/1/statistics")

    assert response.status_code == 200
    body = response.json()
    assert body["total_sales"] == 1
    assert body["derived_total_sales"] == 1
    assert body["is_consistent"] is True


def test_statistics_for_unknown_salesperson(client):
    response = client.get(f"{settings.API_V1_STR}/salespersons/999/statistics")
    assert response.status_code == 404


@pytest.mark.parametrize(
    "message, status_code, code",
    [
        ("disk I/O error", 503, "DATABASE_001"),
        ("database is locked", 409, "DATABASE_002"),
    ],
)
def test_storage_failures_are_mapped(client, payload, monkeypatch, message, status_code, code):
    def failing_append(self, action_type, details, action_date=None):
        raise OperationalError("INSERT INTO audit_log", {}, Exception(message))

    monkeypatch.setattr(AuditLogRepository, "append", failing_append)

    response = client.post(SALES_URL, json=payload)

    assert response.status_code == status_code
    detail = response.json()["detail"]
    assert detail["category"] == "storage"
    assert detail["code"] == code
    assert detail["details"]["operation"] == "record_sale"


def test_validation_failure_is_a_bad_request():
    exc = to_http_exception(
        ValidationException("Sale input validation failed", {"sale_price": ["Must not be negative"]})
    )

    assert exc.status_code == 400
    assert exc.detail["code"] == "VALIDATION_001"
    assert exc.detail["category"] == "validation"


def test_unexpected_domain_error_is_a_server_error():
    assert to_http_exception(DealershipException("boom")).status_code == 500
