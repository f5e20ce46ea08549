# This project was developed with assistance from AI tools.
"""Command-line entrypoint for operators.

Usage:
    python -m loan_documents.cli init-db
    python -m loan_documents.cli completeness 42
    python -m loan_documents.cli requirements SECOND_HOME
"""

import argparse
import asyncio
import json
import logging
import sys

from loan_db import create_all, get_engine, get_session_factory

from .core.logging import configure_logging
from .errors import LoanDocumentsError
from .services.completeness import CompletenessEvaluator
from .services.parsing import parse_loan_type
from .services.requirements import load_document_requirements
from .stores.sql import SqlUnitOfWork

logger = logging.getLogger(__name__)


async def _init_db(database_url: str | None) -> None:
    engine = get_engine(database_url)
    try:
        await create_all(engine)
    finally:
        await engine.dispose()


async def _completeness(database_url: str | None, application_id: int) -> dict:
    engine = get_engine(database_url)
    try:
        async with get_session_factory(engine)() as session:
            evaluator = CompletenessEvaluator(SqlUnitOfWork(session))
            summary = await evaluator.evaluate(application_id)
    finally:
        await engine.dispose()
    return summary.model_dump(mode="json")


def _requirements(loan_type: str | None) -> dict:
    requirements = load_document_requirements()
    if loan_type is None:
        return requirements.as_dict()
    lt = parse_loan_type(loan_type)
    return {lt.value: [d.value for d in requirements.required_for(lt)]}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loan-documents", description="Loan document lifecycle tools",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL for this invocation",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create tables on the configured database")

    completeness = sub.add_parser(
        "completeness", help="Print document completeness for an application",
    )
    completeness.add_argument("application_id", type=int)

    requirements = sub.add_parser(
        "requirements", help="Print required document types per loan type",
    )
    requirements.add_argument("loan_type", nargs="?", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "init-db":
            asyncio.run(_init_db(args.database_url))
            print("Tables created.")
        elif args.command == "completeness":
            result = asyncio.run(_completeness(args.database_url, args.application_id))
            print(json.dumps(result, indent=2))
        elif args.command == "requirements":
            print(json.dumps(_requirements(args.loan_type), indent=2))
    except LoanDocumentsError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
