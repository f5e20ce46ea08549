# This project was developed with assistance from AI tools.
"""Closed-variant parsing for enum-valued inputs.

Callers hand in either an enum member or its string name; anything else
raises a typed error from a dictionary lookup rather than by catching the
``ValueError`` that ``Enum(value)`` would raise.
"""

import enum
from typing import TypeVar

from loan_db.enums import ApplicationStatus, DocumentStatus, DocumentType, LoanType

from ..errors import (
    InvalidDocumentTypeError,
    InvalidStatusError,
    InvalidValueError,
)

E = TypeVar("E", bound=enum.Enum)


def parse_enum(
    enum_cls: type[E],
    value: object,
    *,
    field: str,
    error_cls: type[InvalidValueError] = InvalidValueError,
) -> E:
    """Return the member of ``enum_cls`` named by ``value`` or raise ``error_cls``."""
    if isinstance(value, enum_cls):
        return value
    member = enum_cls.__members__.get(value) if isinstance(value, str) else None
    if member is None:
        raise error_cls(field, value, enum_cls.__members__)
    return member


def parse_document_status(value: object) -> DocumentStatus:
    return parse_enum(DocumentStatus, value, field="document status", error_cls=InvalidStatusError)


def parse_application_status(value: object) -> ApplicationStatus:
    return parse_enum(
        ApplicationStatus, value, field="application status", error_cls=InvalidStatusError,
    )


def parse_document_type(value: object) -> DocumentType:
    return parse_enum(DocumentType, value, field="document type", error_cls=InvalidDocumentTypeError)


def parse_loan_type(value: object) -> LoanType:
    return parse_enum(LoanType, value, field="loan type")
