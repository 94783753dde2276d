import csv
import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.analytics.models.tables import Customer, Office
from app.config import Settings, get_settings
from app.database import ConnectionPool
from app.main import create_app
from app.startup import create_schema, populate_db_from_csv


def _write(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)


@pytest.fixture
def seed_dir(tmp_path):
    _write(tmp_path / "offices.csv", [
        {"officeCode": "1", "city": "Tokyo", "country": "Japan", "addressLine1": "4-1 Kioicho", "addressLine2": ""},
    ])
    _write(tmp_path / "customers.csv", [
        {"customerNumber": "1", "customerName": "Tokyo Collectables, Ltd", "contactFirstName": "Akiko",
         "contactLastName": "Shimamura", "country": "Japan"},
        {"customerNumber": "2", "customerName": "Euro+ Shopping Channel", "contactFirstName": "Diego",
         "contactLastName": "Freyre", "country": "Spain"},
    ])
    return tmp_path


@pytest.fixture
def empty_engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_schema(engine)
    yield engine
    engine.dispose()


def test_populate_seeds_empty_tables(empty_engine, seed_dir, caplog):
    with caplog.at_level(logging.INFO):
        populate_db_from_csv(empty_engine, str(seed_dir))
    with Session(empty_engine) as db:
        assert db.query(Customer).count() == 2
        office = db.query(Office).one()
        assert office.addressLine2 is None
        assert db.get(Customer, 1).customerName == "Tokyo Collectables, Ltd"
    assert "employees.csv not found" in caplog.text


def test_populate_is_idempotent(empty_engine, seed_dir):
    populate_db_from_csv(empty_engine, str(seed_dir))
    populate_db_from_csv(empty_engine, str(seed_dir))
    with Session(empty_engine) as db:
        assert db.query(Customer).count() == 2


def test_app_lifespan_creates_and_seeds(tmp_path, seed_dir):
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'classicmodels.db'}",
        create_schema=True,
        seed_csv_dir=str(seed_dir),
    )
    with TestClient(create_app(settings=settings)) as client:
        r = client.get("/api/analytics", params={"type": "countryNameLength"})
    assert r.status_code == 200
    assert sorted(row["Name"] for row in r.json()["data"]) == ["Japan", "Spain"]


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql+pymysql://user:pw@db/classicmodels")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://dash.example.com")
    monkeypatch.setenv("CREATE_SCHEMA", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.database_url.startswith("mysql+pymysql://")
    assert settings.pool_size == 3
    assert settings.cors_origins == ["http://localhost:3000", "https://dash.example.com"]
    assert settings.create_schema is True
    assert settings.log_level == "DEBUG"


def test_invalid_pool_size(monkeypatch):
    monkeypatch.setenv("DB_POOL_SIZE", "ten")
    with pytest.raises(ValueError, match="DB_POOL_SIZE"):
        get_settings()


def test_injected_pool_is_not_seeded(seed_dir):
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    settings = Settings(database_url="sqlite://", create_schema=True, seed_csv_dir=str(seed_dir))
    with TestClient(create_app(pool=ConnectionPool(engine), settings=settings)):
        pass
    assert inspect(engine).get_table_names() == []
    engine.dispose()
