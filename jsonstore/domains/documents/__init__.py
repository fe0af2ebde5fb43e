from jsonstore.domains.documents.entities import Document, OwnerScope, GLOBAL_OWNER
from jsonstore.domains.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse
from jsonstore.domains.documents.locks import KeyedLock

__all__ = [
    "Document", "OwnerScope", "GLOBAL_OWNER",
    "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "KeyedLock",
]
