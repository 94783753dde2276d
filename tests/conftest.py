import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.analytics.models.tables import Customer, Employee, Office
from app.database import ConnectionPool
from app.main import create_app
from app.startup import create_schema


class StubConnection:
    """Connection double that records calls and can be told to fail."""

    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.executed = []
        self.release_calls = 0

    def execute(self, sql):
        self.executed.append(sql)
        if self.error is not None:
            raise self.error
        return list(self.rows)

    def release(self):
        self.release_calls += 1


class StubPool:
    def __init__(self, rows=None, error=None, acquire_error=None):
        self.rows = rows
        self.error = error
        self.acquire_error = acquire_error
        self.connections = []

    @property
    def acquire_calls(self):
        return len(self.connections)

    def acquire(self):
        if self.acquire_error is not None:
            raise self.acquire_error
        conn = StubConnection(rows=self.rows, error=self.error)
        self.connections.append(conn)
        return conn


@pytest.fixture
def stub_pool():
    return StubPool(rows=[{"Name": "France", "NameLength": 6}])


@pytest.fixture
def client(stub_pool):
    return TestClient(create_app(pool=stub_pool))


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    with Session(engine) as db:
        db.add_all([
            Office(officeCode="1", city="Paris", country="France", addressLine1="43 Rue Jouffroy"),
            Employee(employeeNumber=1, firstName="Gerard", lastName="Bondur", email="gbondur@example.com",
                     officeCode="1", jobTitle="Sales Rep"),
            Employee(employeeNumber=2, firstName="Loui", lastName="Bondur", email="lbondur@example.com",
                     officeCode="1", jobTitle="Sale Manager (EMEA)"),
            Customer(customerNumber=1, customerName="Atelier graphique", contactFirstName="Carine",
                     contactLastName="Schmitt", country="USA"),
            Customer(customerNumber=2, customerName="La Rochelle Gifts", contactFirstName="Janine",
                     contactLastName="Labrune", country="France"),
            Customer(customerNumber=3, customerName="Signal Gift Stores", contactFirstName="Jean",
                     contactLastName="King", country="USA"),
        ])
        db.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_pool(sqlite_engine):
    return ConnectionPool(sqlite_engine)
