"""Data ingestion exceptions for the study knowledge engine."""

from .base import StudyRagError


class IngestionError(StudyRagError):
    """Error while loading a source document into the index."""

    error_code = "SR_ING_001"


class DocumentValidationError(IngestionError):
    """Source document does not match the {title, content, category, tags} shape."""

    error_code = "SR_ING_002"


class EmptyDocumentError(IngestionError):
    """Source document body yields no passages."""

    error_code = "SR_ING_003"


class CorpusSourceError(IngestionError):
    """Corpus file could not be read or parsed."""

    error_code = "SR_ING_004"
