import hmac
import logging
from typing import Optional

from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.core.db import storage_guard
from jsonstore.core.errors import (
    BadInput, DuplicateEmail, InvalidCredential, InvalidCredentials,
    MissingCredential, StoreUnavailable, WeakPassword
)
from jsonstore.core.security import get_password_hash, verify_password
from jsonstore.db.repositories.user_repository import UserRepository
from jsonstore.domains.documents.entities import OwnerScope
from jsonstore.domains.identity.entities import Account, normalize_email

logger = logging.getLogger(__name__)

# Только проверка формата; сохраняется результат normalize_email
_email_adapter = TypeAdapter(EmailStr)


class AccountService:
    """Регистрация и вход по email/паролю"""

    def __init__(
        self,
        session: AsyncSession,
        pwd_context: CryptContext,
        min_password_length: int = 6,
        timeout: Optional[float] = None
    ):
        self.session = session
        self.pwd_context = pwd_context
        self.min_password_length = min_password_length
        self.timeout = timeout
        self.user_repository = UserRepository(session)

    async def register(self, email: Optional[str], password: Optional[str]) -> Account:
        """Регистрация нового аккаунта"""
        if not email or not email.strip() or not password:
            raise BadInput("Email and password are required")

        if len(password) < self.min_password_length:
            raise WeakPassword(f"Password must be at least {self.min_password_length} characters")

        email = normalize_email(email)
        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            raise BadInput("Invalid email address")

        try:
            password_hash = get_password_hash(self.pwd_context, password)
        except PasswordValueError:
            raise BadInput("Password contains unsupported characters")

        async with storage_guard(self.session, "register account", self.timeout):
            if await self.user_repository.email_exists(email):
                raise DuplicateEmail()

            account = Account.create_account(email=email, password_hash=password_hash)
            created = await self.user_repository.create(account)

            if created is None:
                # Гонка двух регистраций либо совпадение ключа
                if await self.user_repository.email_exists(email):
                    raise DuplicateEmail()
                raise StoreUnavailable("Failed to create account")

        logger.info(f"Account {created.id} registered")
        return created

    async def login(self, email: Optional[str], password: Optional[str]) -> Account:
        """Вход: одинаковая ошибка для неизвестного email и неверного пароля"""
        if not email or not email.strip() or not password:
            raise BadInput("Email and password are required")

        async with storage_guard(self.session, "look up account", self.timeout):
            account = await self.user_repository.get_by_email(normalize_email(email))

        if account is None or not self._password_matches(password, account.password_hash):
            raise InvalidCredentials()

        return account

    def _password_matches(self, password: str, password_hash: str) -> bool:
        try:
            return verify_password(self.pwd_context, password, password_hash)
        except PasswordValueError:
            return False


class IdentityResolver:
    """Преобразование ключа запроса в область владения"""

    def __init__(self, admin_api_key: str, user_repository: UserRepository, timeout: Optional[float] = None):
        self.admin_api_key = admin_api_key
        self.user_repository = user_repository
        self.timeout = timeout

    def _is_admin_key(self, credential: str) -> bool:
        if not self.admin_api_key:
            return False
        return hmac.compare_digest(credential.encode(), self.admin_api_key.encode())

    async def resolve_account(self, credential: Optional[str]) -> Optional[Account]:
        """Аккаунт по ключу; None для административного ключа"""
        if not credential:
            raise MissingCredential()

        if self._is_admin_key(credential):
            return None

        async with storage_guard(self.user_repository.session, "resolve API key", self.timeout):
            account = await self.user_repository.get_by_api_key(credential)

        if account is None:
            raise InvalidCredential()
        return account

    async def resolve(self, credential: Optional[str]) -> OwnerScope:
        account = await self.resolve_account(credential)
        if account is None:
            return OwnerScope.unscoped()
        return OwnerScope(account.id)
