from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.db.models.user import User as UserModel
from jsonstore.domains.documents.entities import as_utc
from jsonstore.domains.identity.entities import Account


class UserRepository:
    """Репозиторий для работы с аккаунтами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, account: Account) -> Optional[Account]:
        """Создание аккаунта; None если нарушена уникальность email или ключа"""
        db_user = UserModel(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            api_key=account.api_key,
            created_at=account.created_at
        )

        self.session.add(db_user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return None
        return account

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Получение аккаунта по email"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_by_api_key(self, api_key: str) -> Optional[Account]:
        """Получение аккаунта по выданному ключу"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.api_key == api_key)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def email_exists(self, email: str) -> bool:
        """Проверка существования email"""
        result = await self.session.execute(
            select(UserModel.id).where(UserModel.email == email)
        )
        return result.scalar_one_or_none() is not None

    def _to_domain(self, db_user: UserModel) -> Account:
        """Преобразование модели БД в доменную сущность"""
        return Account(
            id=db_user.id,
            email=db_user.email,
            password_hash=db_user.password_hash,
            api_key=db_user.api_key,
            created_at=as_utc(db_user.created_at)
        )
