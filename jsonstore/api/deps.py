from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.core.db import get_db
from jsonstore.db.repositories.user_repository import UserRepository
from jsonstore.domains.documents.gate import AuthorizationGate
from jsonstore.domains.documents.services import DocumentService, PublicProjection
from jsonstore.domains.identity.services import AccountService, IdentityResolver


def get_identity_resolver(request: Request, db: AsyncSession = Depends(get_db)) -> IdentityResolver:
    settings = request.app.state.settings
    return IdentityResolver(settings.api_key, UserRepository(db), timeout=settings.storage_timeout)


def get_document_service(request: Request, db: AsyncSession = Depends(get_db)) -> DocumentService:
    return DocumentService(
        db,
        locks=request.app.state.document_locks,
        timeout=request.app.state.settings.storage_timeout
    )


def get_authorization_gate(
    resolver: IdentityResolver = Depends(get_identity_resolver),
    documents: DocumentService = Depends(get_document_service)
) -> AuthorizationGate:
    return AuthorizationGate(resolver, documents)


def get_public_projection(documents: DocumentService = Depends(get_document_service)) -> PublicProjection:
    return PublicProjection(documents)


def get_account_service(request: Request, db: AsyncSession = Depends(get_db)) -> AccountService:
    settings = request.app.state.settings
    return AccountService(
        db,
        pwd_context=request.app.state.pwd_context,
        min_password_length=settings.password_min_length,
        timeout=settings.storage_timeout
    )
