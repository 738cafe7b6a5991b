# tests/conftest.py
"""
Shared fixtures: a file-backed SQLite database per test, seeded with a small
dealership (customers, vehicles, salespersons).
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List

import pytest
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from dealership.db.models import (
    AuditLog,
    Base,
    Customer,
    Maintenance,
    Sale,
    Salesperson,
    Vehicle,
    VehicleStatus,
)
from dealership.db.session import create_db_engine, init_db

SNAPSHOT_MODELS = (Customer, Vehicle, Salesperson, Sale, Maintenance, AuditLog)


@pytest.fixture()
def engine(tmp_path):
    test_engine = create_db_engine(f"sqlite:///{tmp_path / 'test_dealership.db'}", echo=False)
    init_db(db_engine=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def seeded(session_factory):
    session = session_factory()
    session.add_all(
        [
            Customer(customer_id=1, first_name="Juan", last_name="Perez",
                     email="juan.perez@example.com", phone="555-1234",
                     address="123 Main St", city="Springfield", state="IL", zip_code="62701"),
            Customer(customer_id=2, first_name="Maria", last_name="Gomez",
                     email="maria.gomez@example.com", phone="555-5678",
                     address="456 Elm St", city="Springfield", state="IL", zip_code="62702"),
            Vehicle(vehicle_id=1, make="Toyota", model="Corolla", year=2022, type="Sedan",
                    price=Decimal("20000.00"), status=VehicleStatus.AVAILABLE.value),
            Vehicle(vehicle_id=2, make="Honda", model="Civic", year=2021, type="Sedan",
                    price=Decimal("18000.00"), status=VehicleStatus.SOLD.value),
            Vehicle(vehicle_id=3, make="Ford", model="Escape", year=2023, type="SUV",
                    price=Decimal("25000.00"), status=VehicleStatus.AVAILABLE.value),
            Salesperson(salesperson_id=1, first_name="Pedro", last_name="Lopez",
                        email="pedro.lopez@example.com", phone="555-1111",
                        total_sales=0, total_revenue=Decimal("0.00")),
            Salesperson(salesperson_id=2, first_name="Lucia", last_name="Hernandez",
                        email="lucia.hernandez@example.com", phone="555-2222",
                        total_sales=0, total_revenue=Decimal("0.00")),
        ]
    )
    session.commit()
    session.close()


@pytest.fixture()
def db(session_factory, seeded):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def sale_args() -> Dict[str, Any]:
    """Arguments for the reference sale of vehicle 1."""
    return {
        "customer_id": 1,
        "vehicle_id": 1,
        "salesperson_id": 1,
        "sale_price": Decimal("19500.00"),
        "sale_date": date(2025, 1, 15),
        "maintenance_date": date(2025, 6, 1),
        "maintenance_description": "Oil and Filter Change",
        "maintenance_cost": Decimal("100.00"),
    }


@pytest.fixture()
def snapshot(session_factory):
    """Callable returning every row of every dealership table, read in a fresh session."""

    def take() -> Dict[str, List[Dict[str, Any]]]:
        session = session_factory()
        try:
            return {
                model.__tablename__: [
                    row.to_dict()
                    for row in session.execute(
                        select(model).order_by(*model.__mapper__.primary_key)
                    ).scalars()
                ]
                for model in SNAPSHOT_MODELS
            }
        finally:
            session.close()

    return take
