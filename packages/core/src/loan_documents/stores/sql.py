# This project was developed with assistance from AI tools.
"""SQLAlchemy-backed stores sharing a single AsyncSession.

Reads use ``populate_existing`` so rows already in the session's identity map
are overwritten with what is committed now. Sessions are built with
``expire_on_commit=False``; without it a long-lived unit of work would keep
serving the values it loaded first.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from loan_db import Application, Document
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

_FRESH = {"populate_existing": True}


class SqlDocumentStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, document: Document) -> Document:
        if document.id is not None and document not in self._session:
            document = await self._session.merge(document)
        else:
            self._session.add(document)
        await self._session.flush()
        # Pick up server-generated columns (updated_at) without a lazy load.
        await self._session.refresh(document)
        return document

    async def find_by_id(self, document_id: int) -> Document | None:
        stmt = select(Document).where(Document.id == document_id).execution_options(**_FRESH)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_application_id(self, application_id: int) -> list[Document]:
        stmt = (
            select(Document)
            .where(Document.application_id == application_id)
            .order_by(Document.id)
            .execution_options(**_FRESH)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_id(self, document_id: int) -> None:
        await self._session.execute(delete(Document).where(Document.id == document_id))

    async def delete_by_application_id(self, application_id: int) -> int:
        result = await self._session.execute(
            delete(Document).where(Document.application_id == application_id)
        )
        return result.rowcount or 0


class SqlApplicationStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, application: Application) -> Application:
        if application.id is not None and application not in self._session:
            application = await self._session.merge(application)
        else:
            self._session.add(application)
        await self._session.flush()
        await self._session.refresh(application)
        return application

    async def find_by_id(self, application_id: int) -> Application | None:
        stmt = (
            select(Application)
            .where(Application.id == application_id)
            .execution_options(**_FRESH)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_user_id(self, user_id: str) -> list[Application]:
        stmt = (
            select(Application)
            .where(Application.user_id == user_id)
            .order_by(Application.id)
            .execution_options(**_FRESH)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_all(self) -> list[Application]:
        stmt = select(Application).order_by(Application.id).execution_options(**_FRESH)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_id(self, application_id: int) -> None:
        await self._session.execute(delete(Application).where(Application.id == application_id))


class SqlUnitOfWork:
    """Document and application stores bound to one session and transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.documents = SqlDocumentStore(session)
        self.applications = SqlApplicationStore(session)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["SqlUnitOfWork"]:
        try:
            yield self
        except Exception:
            logger.debug("Rolling back transaction", exc_info=True)
            await self.session.rollback()
            raise
        await self.session.commit()
