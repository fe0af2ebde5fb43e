import uuid
from datetime import datetime, timezone
from typing import Any, Optional

GLOBAL_OWNER = "global"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite теряет часовой пояс - считаем такие значения UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OwnerScope:
    """Область владения: конкретный аккаунт или административная (unscoped)"""

    def __init__(self, account_id: str):
        if not account_id:
            raise ValueError("account_id is required")
        self.account_id = account_id

    @classmethod
    def unscoped(cls) -> "OwnerScope":
        return cls(GLOBAL_OWNER)

    @property
    def is_unscoped(self) -> bool:
        return self.account_id == GLOBAL_OWNER

    def __eq__(self, other) -> bool:
        if not isinstance(other, OwnerScope):
            return False
        return self.account_id == other.account_id

    def __hash__(self) -> int:
        return hash(self.account_id)

    def __repr__(self) -> str:
        return f"OwnerScope({self.account_id})"


class Document:
    """Сущность JSON-документа"""

    def __init__(
        self,
        id: str,
        name: str,
        data: Any,
        user_id: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.name = name
        self.data = data
        self.user_id = user_id
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def replace_data(self, new_data: Any) -> None:
        self.data = new_data

    def touch(self) -> None:
        """Обновление времени последнего изменения"""
        self.updated_at = utcnow()

    @classmethod
    def create_document(cls, name: str, owner: OwnerScope, data: Any = None) -> "Document":
        """Создание нового документа"""
        now = utcnow()
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            data={} if data is None else data,
            user_id=owner.account_id,
            created_at=now,
            updated_at=now
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, name={self.name}, user_id={self.user_id})"
