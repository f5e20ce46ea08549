# This project was developed with assistance from AI tools.
"""Error taxonomy for the document lifecycle core.

Every error is a caller-input failure detected before anything is persisted,
so none of them is retried. ``http_status`` tells an API layer how to map the
error; the core itself never speaks HTTP.
"""

from collections.abc import Iterable


class LoanDocumentsError(Exception):
    """Base class for all errors raised by this package."""

    http_status = 500


class NotFoundError(LoanDocumentsError):
    """Raised when the requested entity id does not exist."""

    http_status = 404

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ReferenceNotFoundError(LoanDocumentsError):
    """Raised when a foreign key (e.g. a document's application_id) does not resolve."""

    http_status = 404

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value} does not reference an existing record")


class InvalidValueError(LoanDocumentsError, ValueError):
    """Raised when a value falls outside a closed enumeration."""

    http_status = 400

    def __init__(self, field: str, value: object, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {field} '{value}'. Allowed: {', '.join(self.allowed)}."
        )


class InvalidStatusError(InvalidValueError):
    """Raised when a status value is not a member of its enumeration."""


class InvalidDocumentTypeError(InvalidValueError):
    """Raised when a document type name is not a member of DocumentType."""


class InvalidTransitionError(LoanDocumentsError, ValueError):
    """Raised when a document status transition is not allowed."""

    http_status = 400


class DocumentValidationError(LoanDocumentsError, ValueError):
    """Raised when document metadata fails validation (e.g. empty file name)."""

    http_status = 400


class IncompleteDocumentsError(LoanDocumentsError):
    """Raised when an application is approved while required documents are missing."""

    http_status = 409

    def __init__(self, application_id: int, missing_types: Iterable):
        self.application_id = application_id
        self.missing_types = list(missing_types)
        names = ", ".join(getattr(t, "value", str(t)) for t in self.missing_types)
        super().__init__(
            f"Application {application_id} is missing approved documents: {names}"
        )


class DuplicateDocumentError(LoanDocumentsError):
    """Raised when a second active document of the same type is attached."""

    http_status = 409


class ConcurrentUpdateError(LoanDocumentsError):
    """Raised when a record changed since the caller last read it."""

    http_status = 409


class RequirementsConfigError(LoanDocumentsError):
    """Raised when the document requirements table cannot be loaded."""
