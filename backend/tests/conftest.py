from __future__ import annotations

import os
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlmodel import Session, SQLModel, create_engine

from app.api.deps import get_db
from app.db import session as db_session_module
from app.main import app
from app.repositories.holder import SQLModelHolderRepository
from app.services.holder import HolderService


@pytest.fixture()
def db_engine(tmp_path):
    test_database_url = os.getenv("TEST_DATABASE_URL")
    if not test_database_url:
        db_path = tmp_path / f"test_{uuid.uuid4().hex}.db"
        test_database_url = f"sqlite:///{db_path}"

    is_postgres = test_database_url.startswith("postgresql")

    admin_engine = None
    schema_name = None

    if is_postgres:
        schema_name = f"test_{uuid.uuid4().hex}"
        admin_engine = create_engine(test_database_url, future=True)
        with admin_engine.connect() as conn:
            conn.execution_options(isolation_level="AUTOCOMMIT").execute(
                text(f'CREATE SCHEMA IF NOT EXISTS "{schema_name}"')
            )
        client_encoding = os.getenv("POSTGRES_CLIENT_ENCODING", "UTF8")
        connect_args = {"options": f"-csearch_path={schema_name},public -cclient_encoding={client_encoding}"}
        engine = create_engine(test_database_url, connect_args=connect_args, future=True)
    else:
        engine = create_engine(test_database_url, connect_args={"check_same_thread": False})

    SQLModel.metadata.create_all(bind=engine)

    original_engine = db_session_module.engine
    db_session_module.engine = engine

    def override_dependency():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_dependency

    yield engine

    app.dependency_overrides.pop(get_db, None)
    db_session_module.engine = original_engine
    engine.dispose()
    if is_postgres and admin_engine and schema_name:
        with admin_engine.connect() as conn:
            conn.execution_options(isolation_level="AUTOCOMMIT").execute(
                text(f'DROP SCHEMA IF EXISTS "{schema_name}" CASCADE')
            )
        admin_engine.dispose()


@pytest.fixture()
def client(db_engine) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(db_engine) -> Session:
    with Session(db_engine) as session:
        yield session


@pytest.fixture()
def holder_service(db_session: Session) -> HolderService:
    return HolderService(SQLModelHolderRepository(db_session))
