from jsonstore.api.http.health import router as health_router
from jsonstore.api.http.auth import router as auth_router
from jsonstore.api.http.users import router as users_router
from jsonstore.api.http.documents import router as documents_router
from jsonstore.api.http.public import router as public_router

__all__ = [
    "health_router",
    "auth_router",
    "users_router",
    "documents_router",
    "public_router"
]
