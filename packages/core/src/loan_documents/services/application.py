# This project was developed with assistance from AI tools.
"""Application service.

Applications own their documents: deleting one removes its documents in the
same transaction, and moving one to an approval status requires every
document type its loan type needs to be approved first.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from loan_db import Application
from loan_db.enums import ApplicationStatus, LoanType
from pydantic import BaseModel

from ..errors import IncompleteDocumentsError, NotFoundError
from ..stores.base import UnitOfWork
from .completeness import summarize_completeness
from .parsing import parse_application_status, parse_loan_type
from .requirements import DocumentRequirements, load_document_requirements

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset({"loan_type", "requested_amount", "property_value"})

_APPROVAL_STATUSES = ApplicationStatus.approval_statuses()


class ApplicationService:
    def __init__(
        self,
        uow: UnitOfWork,
        requirements: DocumentRequirements | None = None,
    ):
        self._uow = uow
        self._requirements = requirements or load_document_requirements()

    async def create_application(
        self,
        user_id: str,
        loan_type: LoanType | str | None,
        requested_amount: Decimal | None = None,
        property_value: Decimal | None = None,
    ) -> Application:
        """Create an application in IN_REVIEW."""
        application = Application(
            user_id=user_id,
            loan_type=parse_loan_type(loan_type) if loan_type is not None else None,
            status=ApplicationStatus.IN_REVIEW,
            requested_amount=requested_amount,
            property_value=property_value,
        )
        async with self._uow.transaction() as uow:
            application = await uow.applications.save(application)

        logger.info("Created application %s for user %s", application.id, user_id)
        return application

    async def get_application(self, application_id: int) -> Application:
        async with self._uow.transaction() as uow:
            application = await uow.applications.find_by_id(application_id)
        if application is None:
            raise NotFoundError("Application", application_id)
        return application

    async def list_applications_for_user(self, user_id: str) -> list[Application]:
        async with self._uow.transaction() as uow:
            return await uow.applications.find_by_user_id(user_id)

    async def list_applications(self) -> list[Application]:
        async with self._uow.transaction() as uow:
            return await uow.applications.find_all()

    async def update_application(
        self,
        application_id: int,
        fields: Mapping[str, Any] | BaseModel,
    ) -> Application:
        """Update loan details on an application.

        Status changes must use ``update_status()`` instead; a ``status`` key
        in ``fields`` is silently ignored.
        """
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(exclude_unset=True)
        changes = {k: v for k, v in fields.items() if k in _UPDATABLE_FIELDS}
        if changes.get("loan_type") is not None:
            changes["loan_type"] = parse_loan_type(changes["loan_type"])

        async with self._uow.transaction() as uow:
            application = await uow.applications.find_by_id(application_id)
            if application is None:
                raise NotFoundError("Application", application_id)
            for field, value in changes.items():
                setattr(application, field, value)
            application = await uow.applications.save(application)

        logger.info("Updated application %s fields=%s", application_id, sorted(changes))
        return application

    async def update_status(
        self,
        application_id: int,
        new_status: ApplicationStatus | str,
    ) -> Application:
        """Move an application to ``new_status``.

        Raises:
            InvalidStatusError: ``new_status`` is not an ApplicationStatus.
            NotFoundError: unknown ``application_id``.
            IncompleteDocumentsError: the target is an approval status and a
                required document type has no approved document.
        """
        status = parse_application_status(new_status)

        async with self._uow.transaction() as uow:
            application = await uow.applications.find_by_id(application_id)
            if application is None:
                raise NotFoundError("Application", application_id)

            if status in _APPROVAL_STATUSES:
                documents = await uow.documents.find_by_application_id(application_id)
                summary = summarize_completeness(application, documents, self._requirements)
                if not summary.complete:
                    logger.warning(
                        "Blocked application %s -> %s: missing approved %s",
                        application_id,
                        status.value,
                        [t.value for t in summary.missing_types],
                    )
                    raise IncompleteDocumentsError(application_id, summary.missing_types)

            previous = application.status
            application.status = status
            application = await uow.applications.save(application)

        logger.info(
            "Application %s status %s -> %s",
            application_id, getattr(previous, "value", previous), status.value,
        )
        return application

    async def delete_application(self, application_id: int) -> None:
        """Delete an application and all of its documents atomically.

        Deleting a missing id succeeds silently.
        """
        async with self._uow.transaction() as uow:
            removed = await uow.documents.delete_by_application_id(application_id)
            await uow.applications.delete_by_id(application_id)

        logger.info("Deleted application %s and %d document(s)", application_id, removed)
