# This project was developed with assistance from AI tools.
"""Document request/response schemas."""

from datetime import datetime

from loan_db.enums import DocumentStatus, DocumentType
from pydantic import BaseModel, ConfigDict


class DocumentCreate(BaseModel):
    """Metadata for a newly uploaded document."""

    application_id: int
    document_type: str
    file_name: str
    file_url: str


class DocumentUpdate(BaseModel):
    """Partial update of a document.

    ``status`` is a plain string so an unknown value surfaces as
    InvalidStatusError from the service rather than a schema error. Fields
    such as ``id`` or ``application_id`` are dropped: the stored record is
    authoritative for them.
    """

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    file_name: str | None = None
    file_url: str | None = None


class DocumentResponse(BaseModel):
    """Document metadata response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    application_id: int
    document_type: DocumentType
    file_name: str
    file_url: str
    upload_date: datetime
    status: DocumentStatus
    version: int
