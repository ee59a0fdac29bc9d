"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db, Base, hash_password
from database.models import UserORM, OwnerORM, PetTypeORM, PetORM, VisitORM
from auth import create_access_token


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==================== User Fixtures ====================

def _make_user(db_session: Session, id: int, username: str, role: str, enabled: bool = True) -> UserORM:
    salt_hex, hash_hex = hash_password("password123")
    user = UserORM(
        id=id,
        username=username,
        role=role,
        enabled=enabled,
        password_salt=salt_hex,
        password_hash=hash_hex,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def owner_admin_user(db_session: Session) -> UserORM:
    """User allowed to manage pets."""
    return _make_user(db_session, 1, "owneradmin", "owner_admin")


@pytest.fixture
def vet_admin_user(db_session: Session) -> UserORM:
    """User without the owner_admin role."""
    return _make_user(db_session, 2, "vetadmin", "vet_admin")


@pytest.fixture
def disabled_user(db_session: Session) -> UserORM:
    return _make_user(db_session, 3, "disabled", "owner_admin", enabled=False)


# ==================== Auth Token Fixtures ====================

@pytest.fixture
def owner_admin_token(owner_admin_user: UserORM) -> str:
    return create_access_token(data={"sub": owner_admin_user.id})


@pytest.fixture
def auth_headers(owner_admin_token: str) -> Dict[str, str]:
    """Authentication headers for the owner_admin user."""
    return {"Authorization": f"Bearer {owner_admin_token}"}


@pytest.fixture
def auth_headers_vet(vet_admin_user: UserORM) -> Dict[str, str]:
    token = create_access_token(data={"sub": vet_admin_user.id})
    return {"Authorization": f"Bearer {token}"}


# ==================== Clinic Fixtures ====================

@pytest.fixture
def pet_types(db_session: Session) -> Dict[str, PetTypeORM]:
    """Create the cat (id 1) and dog (id 2) pet types."""
    cat = PetTypeORM(id=1, name="cat")
    dog = PetTypeORM(id=2, name="dog")
    db_session.add_all([cat, dog])
    db_session.commit()
    return {"cat": cat, "dog": dog}


@pytest.fixture
def owner(db_session: Session) -> OwnerORM:
    """Owner with id 1."""
    owner = OwnerORM(
        id=1,
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )
    db_session.add(owner)
    db_session.commit()
    db_session.refresh(owner)
    return owner


@pytest.fixture
def other_owner(db_session: Session) -> OwnerORM:
    """Owner with id 2."""
    owner = OwnerORM(
        id=2,
        first_name="Betty",
        last_name="Davis",
        address="638 Cardinal Ave.",
        city="Sun Prairie",
        telephone="6085551749",
    )
    db_session.add(owner)
    db_session.commit()
    db_session.refresh(owner)
    return owner


@pytest.fixture
def pet(db_session: Session, owner: OwnerORM, pet_types: Dict[str, PetTypeORM]) -> PetORM:
    """Cat "Leo" (id 1) owned by owner 1, with one visit."""
    pet = PetORM(
        id=1,
        name="Leo",
        birth_date=date(2010, 9, 7),
        owner=owner,
        type=pet_types["cat"],
    )
    pet.visits.append(VisitORM(id=1, visit_date=date(2013, 1, 1), description="rabies shot"))
    db_session.add(pet)
    db_session.commit()
    db_session.refresh(pet)
    return pet


@pytest.fixture
def pet_data() -> Dict[str, Any]:
    """Valid create/update payload referencing owner 1 and type 1."""
    return {
        "name": "Rex",
        "typeId": 1,
        "ownerId": 1,
        "birthDate": "2020-01-01",
    }
