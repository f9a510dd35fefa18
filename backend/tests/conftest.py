# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.orm import Session

from db import SessionLocal, get_db
from main import app
from models import Base
from models.rescue_location import RescueLocation  # noqa: F401 - register with Base
from rescue_core.geocoder import Coordinate, Geocoder, GeocoderError, Placemark
from rescue_core.provider import get_geocoder


class FakeGeocoder(Geocoder):
    """In-memory geocoder: returns the configured candidates, or raises GeocoderError when error is set."""

    def __init__(self):
        self.coordinates: list[Coordinate] = []
        self.placemarks: list[Placemark] = []
        self.error: str | None = None
        self.calls: list[tuple[str, object]] = []

    async def geocode(self, address: str) -> list[Coordinate]:
        self.calls.append(("geocode", address))
        if self.error:
            raise GeocoderError(self.error)
        return list(self.coordinates)

    async def reverse_geocode(self, coordinate: Coordinate) -> list[Placemark]:
        self.calls.append(("reverse_geocode", coordinate))
        if self.error:
            raise GeocoderError(self.error)
        return list(self.placemarks)


def _get_engine():
    """Engine used by the app (in-memory when TESTING=true)."""
    return SessionLocal.kw["bind"]


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables once."""
    eng = _get_engine()

    # pysqlite manages BEGIN itself and ignores SAVEPOINT scoping; hand transaction
    # control to SQLAlchemy so the per-test rollback undoes repository commits.
    @event.listens_for(eng, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(eng, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    # Drop any connection opened before the listeners were attached.
    eng.dispose()
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back.

    Repository commits only release a SAVEPOINT inside the outer transaction.
    """
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


@pytest.fixture
def fake_geocoder():
    """Fresh fake geocoder per test."""
    return FakeGeocoder()


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session, fake_geocoder):
    """API test client; overrides get_db and get_geocoder, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    app.dependency_overrides[get_geocoder] = lambda: fake_geocoder
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def pytest_sessionfinish(session, exitstatus):
    """Remove any temporary test DB files created during the run (e.g. under /tmp)."""
    import glob
    for pattern in ["/tmp/test_*.db", "test_*.db"]:
        for path in glob.glob(pattern):
            try:
                os.remove(path)
            except OSError:
                pass
