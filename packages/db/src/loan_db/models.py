# This project was developed with assistance from AI tools.
"""
Loan documents -- domain models

Loan applications and the supporting documents submitted for them.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import ApplicationStatus, DocumentStatus, DocumentType, LoanType
from .column_types import UTCDateTime


class Application(Base):
    """Loan application owned by a user."""

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    loan_type = Column(
        Enum(LoanType, name="loan_type", native_enum=False),
        nullable=True,
    )
    status = Column(
        Enum(ApplicationStatus, name="application_status", native_enum=False),
        nullable=False,
        default=ApplicationStatus.IN_REVIEW,
    )
    requested_amount = Column(Numeric(12, 2), nullable=True)
    property_value = Column(Numeric(12, 2), nullable=True)
    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)
    updated_at = Column(UTCDateTime(), server_default=func.now(), onupdate=func.now(), nullable=False)

    documents = relationship(
        "Document",
        back_populates="application",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Document.id",
    )

    def __repr__(self):
        return f"<Application(id={self.id}, status='{self.status}')>"


class Document(Base):
    """Supporting document metadata for an application."""

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    document_type = Column(
        Enum(DocumentType, name="document_type", native_enum=False),
        nullable=False,
    )
    file_name = Column(String(255), nullable=False)
    file_url = Column(String(1000), nullable=False)
    upload_date = Column(UTCDateTime(), nullable=False)
    status = Column(
        Enum(DocumentStatus, name="document_status", native_enum=False),
        nullable=False,
        default=DocumentStatus.PENDING,
    )
    version = Column(Integer, nullable=False)
    updated_at = Column(UTCDateTime(), server_default=func.now(), onupdate=func.now(), nullable=False)

    application = relationship("Application", back_populates="documents")

    # Optimistic concurrency: UPDATEs match on the loaded version.
    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Document(id={self.id}, type='{self.document_type}', status='{self.status}')>"
