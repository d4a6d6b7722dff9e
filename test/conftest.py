"""
Pytest configuration and fixtures for translink tests
"""

import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from translink.config import Settings  # noqa: E402
from translink.core import build_core, build_sql_core  # noqa: E402
from translink.database import Base  # noqa: E402
from translink.plugins.registry import HookRegistry  # noqa: E402
from translink.storage.memory import (  # noqa: E402
    InMemoryAttributeStore,
    InMemoryOptionStore,
    InMemoryRecordLifecycle,
)


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        default_source_language="fr",
        default_target_languages=["en"],
    )


# ── In-memory stores ──────────────────────────────────────────────────────────


@pytest.fixture
def attributes() -> InMemoryAttributeStore:
    return InMemoryAttributeStore()


@pytest.fixture
def options() -> InMemoryOptionStore:
    return InMemoryOptionStore()


@pytest.fixture
def records() -> InMemoryRecordLifecycle:
    return InMemoryRecordLifecycle()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def core(attributes, options, records, hooks, test_settings):
    """A fully wired core on in-memory stores."""
    return build_core(attributes, options, records, hooks=hooks, settings=test_settings)


@pytest.fixture
def catalog(core):
    return core.catalog


@pytest.fixture
def preferences(core):
    return core.preferences


@pytest.fixture
def graph(core):
    return core.graph


@pytest.fixture
def lifecycle(core):
    return core.lifecycle


@pytest.fixture
def overview(core):
    return core.overview


# ── SQL backend ───────────────────────────────────────────────────────────────


@pytest.fixture
def sql_engine():
    """SQLite in-memory engine shared across sessions of one test."""
    import translink.models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(sql_engine):
    return sessionmaker(bind=sql_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def sql_core(session_factory, test_settings):
    return build_sql_core(session_factory, settings=test_settings)
