import asyncio
import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from jsonstore.core.config import Settings
from jsonstore.core.errors import CorruptRecord, StoreUnavailable

logger = logging.getLogger(__name__)

# Базовый класс для моделей
Base = declarative_base()


def create_engine(settings: Settings) -> AsyncEngine:
    """Создание асинхронного движка"""
    return create_async_engine(settings.database_url, future=True, echo=settings.sql_echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Фабрика сессий"""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Проверка соединения и создание таблиц при старте"""
    # Импорт регистрирует модели в Base.metadata
    from jsonstore.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is ready")


@asynccontextmanager
async def storage_errors(session: AsyncSession, action: str):
    """Перевод ошибок драйвера в ошибки хранилища с откатом транзакции"""
    try:
        yield
    except (CorruptRecord, StoreUnavailable):
        await session.rollback()
        raise
    except json.JSONDecodeError as e:
        # JSON-колонку не удалось декодировать
        await session.rollback()
        logger.error(f"Corrupt record while trying to {action}: {e}")
        raise CorruptRecord()
    except (SQLAlchemyError, OSError) as e:
        await session.rollback()
        logger.error(f"Storage failure while trying to {action}: {e}")
        raise StoreUnavailable()


@asynccontextmanager
async def storage_guard(session: AsyncSession, action: str, timeout: Optional[float] = None):
    """Ограничение времени обращения к хранилищу поверх storage_errors.

    Таймаут покрывает и ожидание блокировок внутри блока. По истечении
    транзакция откатывается, наружу уходит StoreUnavailable.
    """
    try:
        async with asyncio.timeout(timeout):
            async with storage_errors(session, action):
                yield
    except TimeoutError:
        await session.rollback()
        logger.error(f"Storage timed out while trying to {action}")
        raise StoreUnavailable("Storage request timed out")


# Функция для dependency injection в FastAPI
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.session_factory() as session:
        yield session
