# This project was developed with assistance from AI tools.
from .base import ApplicationStore, DocumentStore, UnitOfWork
from .sql import SqlApplicationStore, SqlDocumentStore, SqlUnitOfWork

__all__ = [
    "ApplicationStore",
    "DocumentStore",
    "UnitOfWork",
    "SqlApplicationStore",
    "SqlDocumentStore",
    "SqlUnitOfWork",
]
