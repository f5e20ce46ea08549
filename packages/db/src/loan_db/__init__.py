# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import (
    Base,
    create_all,
    get_default_engine,
    get_engine,
    get_session_factory,
)
from .enums import (
    ApplicationStatus,
    DocumentStatus,
    DocumentType,
    LoanType,
)
from .models import (
    Application,
    Document,
)

__all__ = [
    "Base",
    "create_all",
    "get_default_engine",
    "get_engine",
    "get_session_factory",
    "__version__",
    # Enums
    "ApplicationStatus",
    "DocumentStatus",
    "DocumentType",
    "LoanType",
    # Models
    "Application",
    "Document",
]
