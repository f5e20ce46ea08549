# This project was developed with assistance from AI tools.
"""Document lifecycle, completeness and application services."""

from .application import ApplicationService
from .completeness import CompletenessEvaluator, summarize_completeness
from .document import DocumentLifecycleManager
from .requirements import DocumentRequirements, load_document_requirements

__all__ = [
    "ApplicationService",
    "CompletenessEvaluator",
    "DocumentLifecycleManager",
    "DocumentRequirements",
    "load_document_requirements",
    "summarize_completeness",
]
