import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsonstore import __version__
from jsonstore.api.errors import register_error_handlers
from jsonstore.api.http import (
    health_router, auth_router, users_router, documents_router, public_router
)
from jsonstore.core.config import Settings, settings as default_settings
from jsonstore.core.db import create_engine, create_session_factory, init_db
from jsonstore.core.logging import setup_logging
from jsonstore.core.security import create_password_context
from jsonstore.domains.documents.locks import KeyedLock

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения с явно переданной конфигурацией"""
    settings = settings or default_settings
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings)
        try:
            await init_db(engine)
        except Exception:
            # Хранилище недоступно при старте - запуск невозможен
            logger.critical(f"Failed to connect to storage ({settings.storage_name})")
            await engine.dispose()
            raise

        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        if not settings.api_key:
            logger.warning("API_KEY is not set, the administrative key is disabled")
        logger.info(f"JSON API Server v{settings.app_version} ready on port {settings.port}")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("JSON API Server stopped")

    app = FastAPI(
        title="JSON Store",
        description="Хранилище JSON-документов с ключами доступа",
        version=__version__,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.document_locks = KeyedLock()
    app.state.pwd_context = create_password_context(settings.bcrypt_rounds)

    # CORS для панели управления и сторонних клиентов
    origins = settings.origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-API-Key", "Authorization"],
        max_age=86400,
    )

    register_error_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(documents_router)
    app.include_router(public_router)

    return app


app = create_app()
