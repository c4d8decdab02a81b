class GedcomRelationsError(Exception):
    """Base exception for gedcom-relations failures."""


class SourceRetrievalError(GedcomRelationsError):
    """Raised when the raw GEDCOM text could not be obtained."""
