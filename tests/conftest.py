"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before and dropped after each test.
"""

import os

# Must be set before bookkeeper.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bookkeeper.main import app
from bookkeeper.models import Base
from bookkeeper.models.base import get_db, make_engine
from bookkeeper.models.enums import PartyKind
from bookkeeper.schemas.owner import OwnerCreate
from bookkeeper.schemas.party import PartyCreate
from bookkeeper.services.owner_service import OwnerService
from bookkeeper.services.party_service import PartyService


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = make_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    get_db is overridden so the app uses the test session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def owner(db_session):
    """An owner with the default chart of accounts."""
    owner = OwnerService(db_session).create_owner(OwnerCreate(username="alice"))
    db_session.commit()
    return owner


@pytest.fixture
def other_owner(db_session):
    """A second owner, also with the default chart of accounts."""
    owner = OwnerService(db_session).create_owner(OwnerCreate(username="bob"))
    db_session.commit()
    return owner


@pytest.fixture
def customer(db_session, owner):
    party = PartyService(db_session).create_party(
        owner.id, PartyKind.CUSTOMER,
        PartyCreate(name="Joe Blow", address="1 Main St"),
    )
    db_session.commit()
    return party


@pytest.fixture
def vendor(db_session, owner):
    party = PartyService(db_session).create_party(
        owner.id, PartyKind.VENDOR,
        PartyCreate(name="Example Inc", address="2 Side St"),
    )
    db_session.commit()
    return party
