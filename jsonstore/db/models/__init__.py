from jsonstore.db.models.user import User
from jsonstore.db.models.document import Document

__all__ = [
    "User",
    "Document",
]
