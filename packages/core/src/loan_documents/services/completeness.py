# This project was developed with assistance from AI tools.
"""Document completeness checking service.

Looks up which document types an application's loan type requires, then
compares them against the application's documents. A requirement is met only
by an APPROVED document; pending and rejected ones do not count.
"""

import logging
from collections.abc import Iterable

from loan_db import Application, Document
from loan_db.enums import DocumentStatus, DocumentType

from ..errors import NotFoundError
from ..schemas.completeness import CompletenessResponse, DocumentRequirement
from ..stores.base import UnitOfWork
from .requirements import DocumentRequirements, load_document_requirements

logger = logging.getLogger(__name__)

# Human-readable labels for document types
_DOC_TYPE_LABELS: dict[DocumentType, str] = {
    DocumentType.INCOME_PROOF: "Proof of Income",
    DocumentType.APPRAISAL_CERTIFICATE: "Appraisal Certificate",
    DocumentType.CREDIT_HISTORY: "Credit History",
    DocumentType.FIRST_HOME_DEED: "First Home Deed",
    DocumentType.BUSINESS_FINANCIAL_STATEMENT: "Business Financial Statement",
    DocumentType.BUSINESS_PLAN: "Business Plan",
    DocumentType.REMODELING_BUDGET: "Remodeling Budget",
}


def summarize_completeness(
    application: Application,
    documents: Iterable[Document],
    requirements: DocumentRequirements,
) -> CompletenessResponse:
    """Build the completeness summary from already-loaded records.

    ``documents`` must be in insertion order; when several documents share a
    type, the most recent approved one is reported (or the most recent one of
    any status when none is approved).
    """
    required_types = requirements.required_for(application.loan_type)

    latest_by_type: dict[DocumentType, Document] = {}
    approved_by_type: dict[DocumentType, Document] = {}
    for doc in documents:
        latest_by_type[doc.document_type] = doc
        if doc.status == DocumentStatus.APPROVED:
            approved_by_type[doc.document_type] = doc

    result: list[DocumentRequirement] = []
    missing: list[DocumentType] = []
    for dt in required_types:
        doc = approved_by_type.get(dt) or latest_by_type.get(dt)
        is_approved = dt in approved_by_type
        if not is_approved:
            missing.append(dt)
        result.append(
            DocumentRequirement(
                document_type=dt,
                label=_DOC_TYPE_LABELS.get(dt, dt.value),
                is_approved=is_approved,
                document_id=doc.id if doc is not None else None,
                status=doc.status if doc is not None else None,
            )
        )

    return CompletenessResponse(
        application_id=application.id,
        loan_type=application.loan_type,
        complete=not missing,
        missing_types=missing,
        requirements=result,
        approved_count=len(required_types) - len(missing),
        required_count=len(required_types),
    )


class CompletenessEvaluator:
    """Decides whether an application has every required document approved."""

    def __init__(
        self,
        uow: UnitOfWork,
        requirements: DocumentRequirements | None = None,
    ):
        self._uow = uow
        self._requirements = requirements or load_document_requirements()

    async def evaluate(self, application_id: int) -> CompletenessResponse:
        """Check document completeness for an application.

        Raises NotFoundError if the application does not exist.
        """
        async with self._uow.transaction() as uow:
            application = await uow.applications.find_by_id(application_id)
            if application is None:
                raise NotFoundError("Application", application_id)
            documents = await uow.documents.find_by_application_id(application_id)

        summary = summarize_completeness(application, documents, self._requirements)
        logger.debug(
            "Completeness for application %s: %d/%d approved, missing=%s",
            application_id,
            summary.approved_count,
            summary.required_count,
            [t.value for t in summary.missing_types],
        )
        return summary

    evaluate_application_completeness = evaluate
