# This project was developed with assistance from AI tools.
"""Tests for the operator CLI."""

import asyncio
import json

from loan_db import get_engine, get_session_factory
from loan_db.enums import LoanType

from loan_documents.cli import main
from loan_documents.services import ApplicationService, DocumentLifecycleManager
from loan_documents.stores import SqlUnitOfWork


def _db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"


async def _seed(url):
    engine = get_engine(url)
    try:
        async with get_session_factory(engine)() as session:
            uow = SqlUnitOfWork(session)
            app = await ApplicationService(uow).create_application("user-1", LoanType.FIRST_HOME)
            doc = await DocumentLifecycleManager(uow).create(
                app.id, "INCOME_PROOF", "paystub.pdf", "s3://loan-docs/paystub.pdf",
            )
            await DocumentLifecycleManager(uow).update(doc.id, {"status": "APPROVED"})
            return app.id
    finally:
        await engine.dispose()


def test_init_db_then_completeness(tmp_path, capsys):
    url = _db_url(tmp_path)
    assert main(["--database-url", url, "init-db"]) == 0
    app_id = asyncio.run(_seed(url))
    capsys.readouterr()

    assert main(["--database-url", url, "completeness", str(app_id)]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["application_id"] == app_id
    assert result["complete"] is False
    assert "INCOME_PROOF" not in result["missing_types"]
    assert result["approved_count"] == 1


def test_completeness_unknown_application(tmp_path, capsys):
    url = _db_url(tmp_path)
    main(["--database-url", url, "init-db"])

    assert main(["--database-url", url, "completeness", "9999"]) == 1
    assert "Application 9999 not found" in capsys.readouterr().err


def test_requirements_for_loan_type(capsys):
    assert main(["requirements", "SECOND_HOME"]) == 0

    result = json.loads(capsys.readouterr().out)
    assert "FIRST_HOME_DEED" in result["SECOND_HOME"]


def test_requirements_full_table(capsys):
    assert main(["requirements"]) == 0

    result = json.loads(capsys.readouterr().out)
    assert set(result) == {"_default", *LoanType.__members__}


def test_requirements_unknown_loan_type(capsys):
    assert main(["requirements", "JUMBO"]) == 1
    assert "Invalid loan type 'JUMBO'" in capsys.readouterr().err
