import uuid
from datetime import datetime, timezone
from typing import Optional

from jsonstore.core.security import generate_api_key


def normalize_email(email: str) -> str:
    """Email хранится в нижнем регистре без пробелов по краям"""
    return email.strip().lower()


class Account:
    """Сущность аккаунта домена Identity"""

    def __init__(
        self,
        id: str,
        email: str,
        password_hash: str,
        api_key: str,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.email = email
        self.password_hash = password_hash
        self.api_key = api_key
        self.created_at = created_at or datetime.now(timezone.utc)

    def to_public_dict(self) -> dict:
        """Данные аккаунта для ответа (без хеша пароля)"""
        return {
            "id": self.id,
            "email": self.email,
            "api_key": self.api_key,
        }

    @classmethod
    def create_account(cls, email: str, password_hash: str) -> "Account":
        """Создание нового аккаунта с выпуском ключа"""
        return cls(
            id=str(uuid.uuid4()),
            email=normalize_email(email),
            password_hash=password_hash,
            api_key=generate_api_key()
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Account(id={self.id}, email={self.email})"
