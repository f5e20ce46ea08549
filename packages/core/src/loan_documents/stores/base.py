# This project was developed with assistance from AI tools.
"""Store contracts consumed by the services.

Services receive a ``UnitOfWork`` in their constructor instead of reaching for
a global session, so tests can hand in mocks and callers decide the session
lifetime.
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from loan_db import Application, Document


class DocumentStore(Protocol):
    async def save(self, document: Document) -> Document:
        """Insert when ``document.id`` is unset, otherwise update."""
        ...

    async def find_by_id(self, document_id: int) -> Document | None: ...

    async def find_by_application_id(self, application_id: int) -> list[Document]:
        """Return the application's documents in insertion order."""
        ...

    async def delete_by_id(self, document_id: int) -> None:
        """Delete the document; a missing id is a no-op."""
        ...

    async def delete_by_application_id(self, application_id: int) -> int:
        """Delete every document of an application and return how many went."""
        ...


class ApplicationStore(Protocol):
    async def save(self, application: Application) -> Application: ...

    async def find_by_id(self, application_id: int) -> Application | None: ...

    async def find_by_user_id(self, user_id: str) -> list[Application]: ...

    async def find_all(self) -> list[Application]: ...

    async def delete_by_id(self, application_id: int) -> None: ...


class UnitOfWork(Protocol):
    """Stores sharing one transactional scope."""

    documents: DocumentStore
    applications: ApplicationStore

    def transaction(self) -> AbstractAsyncContextManager["UnitOfWork"]:
        """Commit on normal exit, roll back if the block raises."""
        ...
