# This project was developed with assistance from AI tools.
"""
Domain enums for loan applications and their supporting documents.

Shared domain types used by both SQLAlchemy models (loan_db package)
and Pydantic schemas (loan_documents package).
"""

import enum


class LoanType(str, enum.Enum):
    FIRST_HOME = "FIRST_HOME"
    SECOND_HOME = "SECOND_HOME"
    COMMERCIAL = "COMMERCIAL"
    REMODELING = "REMODELING"


class ApplicationStatus(str, enum.Enum):
    IN_REVIEW = "IN_REVIEW"
    PENDING_DOCUMENTS = "PENDING_DOCUMENTS"
    IN_EVALUATION = "IN_EVALUATION"
    PRE_APPROVED = "PRE_APPROVED"
    FINAL_APPROVAL = "FINAL_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    IN_DISBURSEMENT = "IN_DISBURSEMENT"

    @classmethod
    def approval_statuses(cls) -> frozenset["ApplicationStatus"]:
        """Statuses that require every required document type to be approved."""
        return frozenset({cls.APPROVED, cls.IN_DISBURSEMENT})


class DocumentType(str, enum.Enum):
    INCOME_PROOF = "INCOME_PROOF"
    APPRAISAL_CERTIFICATE = "APPRAISAL_CERTIFICATE"
    CREDIT_HISTORY = "CREDIT_HISTORY"
    FIRST_HOME_DEED = "FIRST_HOME_DEED"
    BUSINESS_FINANCIAL_STATEMENT = "BUSINESS_FINANCIAL_STATEMENT"
    BUSINESS_PLAN = "BUSINESS_PLAN"
    REMODELING_BUDGET = "REMODELING_BUDGET"


class DocumentStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def terminal_statuses(cls) -> frozenset["DocumentStatus"]:
        """Statuses a reviewer decision cannot move out of."""
        return frozenset({cls.APPROVED, cls.REJECTED})

    @classmethod
    def valid_transitions(cls) -> dict["DocumentStatus", frozenset["DocumentStatus"]]:
        """Allowed reviewer-driven status transitions."""
        return {
            cls.PENDING: frozenset({cls.APPROVED, cls.REJECTED}),
            cls.APPROVED: frozenset(),
            cls.REJECTED: frozenset(),
        }
