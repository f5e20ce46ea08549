# This project was developed with assistance from AI tools.
"""Document lifecycle service.

Owns every rule about a document after upload: it must belong to an existing
application, it starts PENDING, a reviewer moves it to APPROVED or REJECTED,
and its ``id``/``application_id`` never change. Deletion is idempotent.

All validation happens before the first write, and each operation runs in a
single unit-of-work transaction, so a failed call never leaves a partial
change behind.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from loan_db import Document
from loan_db.enums import DocumentStatus, DocumentType
from pydantic import BaseModel
from sqlalchemy.orm.exc import StaleDataError

from ..core.config import Settings
from ..core.config import settings as default_settings
from ..errors import (
    ConcurrentUpdateError,
    DocumentValidationError,
    DuplicateDocumentError,
    InvalidTransitionError,
    NotFoundError,
    ReferenceNotFoundError,
)
from ..stores.base import UnitOfWork
from .parsing import parse_document_status, parse_document_type

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("status", "file_name", "file_url")


def _require_text(field: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise DocumentValidationError(f"{field} must be a non-empty string")
    return value


def _patch_to_dict(fields: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Keep only updatable fields; ``id``/``application_id`` are never taken from a patch."""
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    ignored = sorted(set(fields) - set(_UPDATABLE_FIELDS))
    if ignored:
        logger.debug("Ignoring non-updatable document fields: %s", ignored)
    return {k: v for k, v in fields.items() if k in _UPDATABLE_FIELDS}


class DocumentLifecycleManager:
    """Create, read, update and delete documents attached to applications."""

    def __init__(self, uow: UnitOfWork, settings: Settings | None = None):
        self._uow = uow
        self._settings = settings or default_settings

    async def create(
        self,
        application_id: int,
        document_type: DocumentType | str,
        file_name: str,
        file_url: str,
    ) -> Document:
        """Attach a new PENDING document to an existing application.

        Raises:
            InvalidDocumentTypeError: ``document_type`` is not a DocumentType.
            DocumentValidationError: empty ``file_name`` or ``file_url``.
            ReferenceNotFoundError: ``application_id`` does not exist.
        """
        doc_type = parse_document_type(document_type)
        _require_text("file_name", file_name)
        _require_text("file_url", file_url)

        async with self._uow.transaction() as uow:
            application = await uow.applications.find_by_id(application_id)
            if application is None:
                raise ReferenceNotFoundError("application_id", application_id)

            if self._settings.ENFORCE_SINGLE_ACTIVE_DOCUMENT:
                await self._ensure_no_active_duplicate(uow, application_id, doc_type)

            document = Document(
                application_id=application_id,
                document_type=doc_type,
                file_name=file_name,
                file_url=file_url,
                upload_date=datetime.now(UTC),
                status=DocumentStatus.PENDING,
            )
            document = await uow.documents.save(document)

        logger.info(
            "Created document %s (%s) for application %s",
            document.id, doc_type.value, application_id,
        )
        return document

    async def get_by_id(self, document_id: int) -> Document:
        """Return a document or raise NotFoundError."""
        async with self._uow.transaction() as uow:
            document = await uow.documents.find_by_id(document_id)
        if document is None:
            raise NotFoundError("Document", document_id)
        return document

    async def list_by_application(self, application_id: int) -> list[Document]:
        """Return an application's documents in insertion order.

        An unknown application yields an empty list rather than an error.
        """
        async with self._uow.transaction() as uow:
            return await uow.documents.find_by_application_id(application_id)

    async def update(
        self,
        document_id: int,
        fields: Mapping[str, Any] | BaseModel,
        *,
        expected_version: int | None = None,
    ) -> Document:
        """Apply ``status``/``file_name``/``file_url`` changes to a stored document.

        ``document_id`` only selects the record; any ``id`` or
        ``application_id`` inside ``fields`` is ignored.

        Raises:
            NotFoundError: unknown ``document_id``.
            InvalidStatusError: ``status`` is not a DocumentStatus.
            DocumentValidationError: ``file_name`` or ``file_url`` is empty or null.
            InvalidTransitionError: strict transitions are on and the move
                leaves a terminal status.
            ConcurrentUpdateError: ``expected_version`` does not match, or the
                row changed between read and write.
        """
        changes = _patch_to_dict(fields)

        async with self._uow.transaction() as uow:
            document = await uow.documents.find_by_id(document_id)
            if document is None:
                raise NotFoundError("Document", document_id)

            if expected_version is not None and document.version != expected_version:
                raise ConcurrentUpdateError(
                    f"Document {document_id} is at version {document.version}, "
                    f"expected {expected_version}"
                )

            previous_status = document.status
            if "status" in changes:
                changes["status"] = parse_document_status(changes["status"])
                self._check_transition(document, changes["status"])
                if (
                    self._settings.ENFORCE_SINGLE_ACTIVE_DOCUMENT
                    and previous_status == DocumentStatus.REJECTED
                    and changes["status"] != DocumentStatus.REJECTED
                ):
                    await self._ensure_no_active_duplicate(
                        uow, document.application_id, document.document_type,
                    )
            for field in ("file_name", "file_url"):
                if field in changes:
                    _require_text(field, changes[field])

            for field, value in changes.items():
                setattr(document, field, value)

            try:
                document = await uow.documents.save(document)
            except StaleDataError as exc:
                raise ConcurrentUpdateError(
                    f"Document {document_id} was modified concurrently"
                ) from exc

        if previous_status != document.status:
            logger.info(
                "Document %s status %s -> %s",
                document_id, previous_status.value, document.status.value,
            )
        else:
            logger.info("Updated document %s fields=%s", document_id, sorted(changes))
        return document

    async def delete(self, document_id: int) -> None:
        """Delete a document. Deleting a missing id succeeds silently."""
        async with self._uow.transaction() as uow:
            await uow.documents.delete_by_id(document_id)
        logger.info("Deleted document %s", document_id)

    # Names used by the outward-facing interface
    create_document = create
    get_document = get_by_id
    list_documents_for_application = list_by_application
    update_document = update
    delete_document = delete

    def _check_transition(self, document: Document, new_status: DocumentStatus) -> None:
        current = document.status
        # Re-applying the current status is a no-op, which keeps approvals idempotent.
        if new_status == current or not self._settings.STRICT_DOCUMENT_TRANSITIONS:
            return

        allowed = DocumentStatus.valid_transitions().get(current, frozenset())
        if new_status not in allowed:
            logger.warning(
                "Rejected document %s transition %s -> %s",
                document.id, current.value, new_status.value,
            )
            raise InvalidTransitionError(
                f"Cannot transition document {document.id} from '{current.value}' to "
                f"'{new_status.value}'. Allowed: "
                f"{sorted(s.value for s in allowed) if allowed else 'none (terminal status)'}."
            )

    async def _ensure_no_active_duplicate(
        self,
        uow: UnitOfWork,
        application_id: int,
        doc_type: DocumentType,
    ) -> None:
        """Raise DuplicateDocumentError if a non-rejected document of ``doc_type`` exists.

        This is a read-then-write check with no backing unique constraint, so two
        creates racing in separate transactions can both pass it. Callers that
        need a hard guarantee must serialize uploads per application.
        """
        existing = await uow.documents.find_by_application_id(application_id)
        active = [
            d for d in existing
            if d.document_type == doc_type and d.status != DocumentStatus.REJECTED
        ]
        if active:
            raise DuplicateDocumentError(
                f"Application {application_id} already has an active {doc_type.value} "
                f"document (id={active[0].id})"
            )
