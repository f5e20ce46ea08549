# This project was developed with assistance from AI tools.
"""Application request/response schemas."""

from datetime import datetime
from decimal import Decimal

from loan_db.enums import ApplicationStatus, LoanType
from pydantic import BaseModel, ConfigDict


class ApplicationCreate(BaseModel):
    user_id: str
    loan_type: LoanType | None = None
    requested_amount: Decimal | None = None
    property_value: Decimal | None = None


class ApplicationUpdate(BaseModel):
    """Partial update. Status changes go through ``update_status`` instead."""

    model_config = ConfigDict(extra="ignore")

    loan_type: LoanType | None = None
    requested_amount: Decimal | None = None
    property_value: Decimal | None = None


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    loan_type: LoanType | None = None
    status: ApplicationStatus
    requested_amount: Decimal | None = None
    property_value: Decimal | None = None
    created_at: datetime
    updated_at: datetime
