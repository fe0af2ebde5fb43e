from logging.config import dictConfig


def setup_logging(level: str = "INFO") -> None:
    """Настройка логирования приложения"""
    level = level.upper()
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "jsonstore": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn": {"level": level},
            # SQL-эхо управляется через SQL_ECHO
            "sqlalchemy.engine": {"level": "WARNING"},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    })
