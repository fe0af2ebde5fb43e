from jsonstore.db.repositories.user_repository import UserRepository
from jsonstore.db.repositories.document_repository import DocumentRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
]
