# tests/test_db_models.py
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from dealership.db.models import Customer, Maintenance, Sale, Salesperson, Vehicle
from dealership.db.session import create_db_engine, init_db, verify_db_connection

def test_schema_has_every_table(engine):
    tables = set(inspect(engine).get_table_names())
    assert {"customers", "vehicles", "salespersons", "sales", "maintenance", "audit_log"} <= tables

def test_in_memory_engine_is_usable():
    memory_engine = create_db_engine("sqlite:///:memory:", echo=False)
    init_db(db_engine=memory_engine)
    assert verify_db_connection(memory_engine)
    memory_engine.dispose()

def test_vehicle_defaults_to_available(db):
    vehicle = Vehicle(make="Mazda", model="3", year=2024, type="Hatchback", price=Decimal("23000.00"))
    db.add(vehicle)
    db.flush()

    assert vehicle.status == "Available"
    assert vehicle.is_available

def test_to_dict_converts_values(db):
    vehicle = db.get(Vehicle, 1)
    data = vehicle.to_dict()

    assert data["price"] == "20000.00"
    assert data["status"] == "Available"

def test_relationships(db):
    db.add(Sale(customer_id=1, vehicle_id=3, salesperson_id=2,
                sale_date=date(2025, 2, 1), sale_price=Decimal("24000.00")))
    db.add(Maintenance(vehicle_id=3, maintenance_date=date(2025, 8, 1),
                       description="Tire Rotation", cost=Decimal("50.00")))
    db.commit()

    assert len(db.get(Customer, 1).sales) == 1
    assert db.get(Salesperson, 2).sales[0].vehicle.make == "Ford"
    assert db.get(Vehicle, 3).maintenance_records[0].description == "Tire Rotation"

def test_foreign_keys_are_enforced(db):
    db.add(Sale(customer_id=999, vehicle_id=1, salesperson_id=1,
                sale_date=date(2025, 2, 1), sale_price=Decimal("1.00")))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

def test_unreachable_database_fails_verification(tmp_path):
    missing_dir_engine = create_db_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}", echo=False)
    assert verify_db_connection(missing_dir_engine) is False
    missing_dir_engine.dispose()
