# This project was developed with assistance from AI tools.
"""Required document types per loan type.

The table is deployment configuration: it is read from a YAML file (the
bundled ``data/document_requirements.yaml`` unless DOCUMENT_REQUIREMENTS_FILE
points elsewhere) and validated on load, so a typo in a document type name
fails at startup instead of silently making applications un-approvable.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from loan_db.enums import DocumentType, LoanType

from ..errors import RequirementsConfigError

logger = logging.getLogger(__name__)

DEFAULT_KEY = "_default"

_BUNDLED_REQUIREMENTS_FILE = (
    Path(__file__).resolve().parents[1] / "data" / "document_requirements.yaml"
)


class DocumentRequirements:
    """Lookup table of loan type -> required document types."""

    def __init__(self, table: Mapping[str, tuple[DocumentType, ...]]):
        if DEFAULT_KEY not in table:
            raise RequirementsConfigError(f"Requirements table has no '{DEFAULT_KEY}' entry")
        self._table = dict(table)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "DocumentRequirements":
        """Validate a raw ``{loan_type: [document_type, ...]}`` mapping."""
        if not isinstance(raw, Mapping):
            raise RequirementsConfigError("Requirements must be a mapping of loan type to list")

        table: dict[str, tuple[DocumentType, ...]] = {}
        for key, doc_types in raw.items():
            if key != DEFAULT_KEY and key not in LoanType.__members__:
                raise RequirementsConfigError(
                    f"Unknown loan type '{key}'. Expected one of: "
                    f"{', '.join([DEFAULT_KEY, *LoanType.__members__])}"
                )
            if not isinstance(doc_types, list):
                raise RequirementsConfigError(f"Requirements for '{key}' must be a list")
            unknown = [
                d for d in doc_types
                if not isinstance(d, str) or d not in DocumentType.__members__
            ]
            if unknown:
                raise RequirementsConfigError(
                    f"Unknown document type(s) for '{key}': {', '.join(map(str, unknown))}"
                )
            # dict.fromkeys drops duplicates but keeps the configured order
            table[key] = tuple(DocumentType[d] for d in dict.fromkeys(doc_types))
        return cls(table)

    @classmethod
    def from_yaml(cls, path: Path) -> "DocumentRequirements":
        try:
            data = yaml.safe_load(Path(path).read_text())
        except (OSError, yaml.YAMLError) as exc:
            raise RequirementsConfigError(f"Cannot read requirements file {path}: {exc}") from exc
        if not isinstance(data, Mapping) or "requirements" not in data:
            raise RequirementsConfigError(f"{path} has no top-level 'requirements' key")
        return cls.from_mapping(data["requirements"])

    def required_for(self, loan_type: LoanType | str | None) -> tuple[DocumentType, ...]:
        """Return required types for a loan type, falling back to ``_default``."""
        key = loan_type.value if isinstance(loan_type, LoanType) else loan_type
        reqs = self._table.get(key or DEFAULT_KEY)
        if reqs is None:
            return self._table[DEFAULT_KEY]
        return reqs

    def as_dict(self) -> dict[str, list[str]]:
        return {key: [d.value for d in types] for key, types in self._table.items()}


@lru_cache
def load_document_requirements(path: Path | None = None) -> DocumentRequirements:
    """Load (and cache) the requirements table from YAML."""
    if path is None:
        from ..core.config import settings

        path = settings.DOCUMENT_REQUIREMENTS_FILE or _BUNDLED_REQUIREMENTS_FILE
    requirements = DocumentRequirements.from_yaml(path)
    logger.info("Loaded document requirements from %s", path)
    return requirements
