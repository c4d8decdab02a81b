from gedcom_relations.core.exceptions import GedcomRelationsError, SourceRetrievalError

__all__ = ["GedcomRelationsError", "SourceRetrievalError"]
