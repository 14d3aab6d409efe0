import os
from collections.abc import Generator

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from movietracker.api.deps import get_db, get_omdb_client
from movietracker.main import app
from movietracker.models.movie import Movie

from .fixtures.factories import *
from .fixtures.omdb import *

ALEMBIC_CFG_PATH = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")


@pytest.fixture(scope="session")
def create_test_database(
    tmp_path_factory: pytest.TempPathFactory,
) -> Generator[Engine, None, None]:
    db_path = tmp_path_factory.mktemp("db") / "movietracker_test.db"
    test_database_url = f"sqlite:///{db_path}"

    alembic_cfg = Config(ALEMBIC_CFG_PATH)
    alembic_cfg.set_main_option("sqlalchemy.url", test_database_url)
    command.upgrade(alembic_cfg, "head")

    engine = create_engine(
        test_database_url, connect_args={"check_same_thread": False}
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(create_test_database: Engine) -> Generator[Session, None, None]:
    session = Session(create_test_database)

    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.rollback()
    session.execute(delete(Movie))
    session.commit()
    session.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def omdb_client(fake_omdb_client: FakeOmdbClient) -> FakeOmdbClient:
    app.dependency_overrides[get_omdb_client] = lambda: fake_omdb_client
    return fake_omdb_client
