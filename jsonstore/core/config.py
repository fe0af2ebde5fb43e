from typing import List

from pydantic_settings import BaseSettings

from jsonstore import __version__


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./jsonstore.db"
    sql_echo: bool = False

    # Глобальный административный ключ (пустой - отключен)
    api_key: str = ""

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: str = "*"

    # Таймаут ожидания хранилища в секундах
    storage_timeout: float = 10.0

    password_min_length: int = 6
    bcrypt_rounds: int = 12

    log_level: str = "INFO"
    app_version: str = __version__

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def origins(self) -> List[str]:
        """Список разрешенных origin для CORS"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def storage_name(self) -> str:
        """Название движка хранилища для health-эндпоинта"""
        return self.database_url.split(":", 1)[0].split("+", 1)[0]


settings = Settings()
