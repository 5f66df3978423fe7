#!/usr/bin/env python
"""
pytest configuration file

Shared fixtures: an in-memory SQLite database, seeded companies/jobs/users,
tokens for each user, and a TestClient wired to the test database.
"""

import os

# Must be set before jobly.settings is imported anywhere
os.environ.setdefault("JOBLY_ENVIRONMENT", "test")
os.environ.setdefault("JOBLY_BCRYPT_ROUNDS", "4")
os.environ.setdefault("JOBLY_DEBUG", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from jobly.db.models import Base  # noqa: E402
from jobly.db.session import configure_engine, get_db  # noqa: E402
from jobly.main import app  # noqa: E402
from jobly.repositories import company_repository, job_repository, user_repository  # noqa: E402
from jobly.services.auth_service import create_access_token  # noqa: E402

SEED_COMPANIES = [
    {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"},
    {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": "http://c2.img"},
    {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 3, "logoUrl": "http://c3.img"},
]

SEED_JOBS = [
    {"title": "j1", "salary": 1000, "equity": 0.1, "companyHandle": "c1"},
    {"title": "j2", "salary": 2000, "equity": 0.0, "companyHandle": "c1"},
    {"title": "j3", "salary": 3000, "equity": None, "companyHandle": "c2"},
]

SEED_USERS = [
    {"username": "u1", "password": "password1", "firstName": "U1F", "lastName": "U1L", "email": "user1@user.com"},
    {"username": "u2", "password": "password2", "firstName": "U2F", "lastName": "U2L", "email": "user2@user.com"},
    {
        "username": "admin",
        "password": "password3",
        "firstName": "AdF",
        "lastName": "AdL",
        "email": "admin@user.com",
        "isAdmin": True,
    },
]


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = configure_engine(
        create_engine(
            "sqlite://",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db_session: Session) -> Session:
    """Database holding SEED_COMPANIES, SEED_JOBS and SEED_USERS."""
    for company in SEED_COMPANIES:
        company_repository.create(db_session, company)
    for job in SEED_JOBS:
        job_repository.create(db_session, job)
    for user in SEED_USERS:
        user_repository.register(db_session, user)
    return db_session


@pytest.fixture
def job_ids(seeded_db: Session) -> dict[str, int]:
    """Seeded job title -> generated id."""
    return {job["title"]: job["id"] for job in job_repository.find_all(seeded_db)}


@pytest.fixture
def u1_token() -> str:
    return create_access_token({"username": "u1", "isAdmin": False})


@pytest.fixture
def u2_token() -> str:
    return create_access_token({"username": "u2", "isAdmin": False})


@pytest.fixture
def admin_token() -> str:
    return create_access_token({"username": "admin", "isAdmin": True})


@pytest.fixture
def client(seeded_db, session_factory):
    """TestClient whose requests use the seeded test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
