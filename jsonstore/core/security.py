import uuid
from typing import Optional

from passlib.context import CryptContext


def create_password_context(rounds: int = 12) -> CryptContext:
    """Контекст для хеширования паролей.

    bcrypt учитывает только первые 72 байта пароля, усечение выполняет сам backend.
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    """Проверка пароля"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(pwd_context: CryptContext, password: str) -> str:
    """Хеширование пароля"""
    return pwd_context.hash(password)


def generate_api_key() -> str:
    """Выпуск нового ключа аккаунта"""
    return str(uuid.uuid4())


def extract_api_key(header_value: Optional[str], query_value: Optional[str]) -> Optional[str]:
    """Ключ из заголовка X-API-Key, иначе из параметра api_key"""
    if header_value:
        return header_value.strip() or None
    if query_value:
        return query_value.strip() or None
    return None
