# This project was developed with assistance from AI tools.
"""Shared fixtures -- in-memory SQLite database and services bound to it.

Each test gets a fresh database. StaticPool keeps the single in-memory
connection alive for the engine's lifetime so every session sees the same
tables.
"""

import pytest
import pytest_asyncio
from loan_db import create_all, get_engine, get_session_factory
from sqlalchemy.pool import StaticPool

from loan_documents.core.config import Settings
from loan_documents.services import (
    ApplicationService,
    CompletenessEvaluator,
    DocumentLifecycleManager,
    DocumentRequirements,
)
from loan_documents.stores import SqlUnitOfWork

SQLITE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def async_engine():
    engine = get_engine(
        SQLITE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    async with get_session_factory(async_engine)() as session:
        yield session


@pytest.fixture
def uow(db_session):
    return SqlUnitOfWork(db_session)


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


@pytest.fixture
def requirements():
    return DocumentRequirements.from_mapping(
        {
            "_default": ["INCOME_PROOF", "APPRAISAL_CERTIFICATE", "CREDIT_HISTORY"],
            "FIRST_HOME": ["INCOME_PROOF", "APPRAISAL_CERTIFICATE", "CREDIT_HISTORY"],
            "SECOND_HOME": [
                "INCOME_PROOF",
                "APPRAISAL_CERTIFICATE",
                "FIRST_HOME_DEED",
                "CREDIT_HISTORY",
            ],
        }
    )


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        STRICT_DOCUMENT_TRANSITIONS=True,
        ENFORCE_SINGLE_ACTIVE_DOCUMENT=False,
    )


@pytest.fixture
def documents(uow, settings):
    return DocumentLifecycleManager(uow, settings)


@pytest.fixture
def applications(uow, requirements):
    return ApplicationService(uow, requirements)


@pytest.fixture
def evaluator(uow, requirements):
    return CompletenessEvaluator(uow, requirements)
