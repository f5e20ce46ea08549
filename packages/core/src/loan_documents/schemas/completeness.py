# This project was developed with assistance from AI tools.
"""Document completeness response schemas."""

from loan_db.enums import DocumentStatus, DocumentType, LoanType
from pydantic import BaseModel


class DocumentRequirement(BaseModel):
    """A single required document type and whether it has been approved."""

    document_type: DocumentType
    label: str
    is_approved: bool = False
    document_id: int | None = None
    status: DocumentStatus | None = None


class CompletenessResponse(BaseModel):
    """Document completeness summary for an application."""

    application_id: int
    loan_type: LoanType | None = None
    complete: bool
    missing_types: list[DocumentType]
    requirements: list[DocumentRequirement]
    approved_count: int
    required_count: int
