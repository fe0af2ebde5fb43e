import logging
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.core.db import storage_guard
from jsonstore.core.errors import BadInput, NotFound, StoreUnavailable
from jsonstore.db.repositories.document_repository import DocumentRepository
from jsonstore.domains.documents.entities import Document, OwnerScope
from jsonstore.domains.documents.locks import KeyedLock
from jsonstore.domains.documents.schemas import DocumentUpdate

logger = logging.getLogger(__name__)

# Попытки подобрать свободный идентификатор при создании
CREATE_ATTEMPTS = 3


class DocumentService:
    """Хранилище документов с сериализацией записи по ключу.

    Правило видимости применяется здесь и только здесь: документ виден
    своему владельцу и административной области. Для всех остальных он
    неотличим от отсутствующего (NotFound).
    """

    def __init__(self, session: AsyncSession, locks: KeyedLock, timeout: Optional[float] = None):
        self.session = session
        self.locks = locks
        self.timeout = timeout
        self.document_repository = DocumentRepository(session)

    def _guard(self, action: str):
        return storage_guard(self.session, action, self.timeout)

    @staticmethod
    def _owner_filter(scope: OwnerScope) -> Optional[str]:
        return None if scope.is_unscoped else scope.account_id

    async def create(self, scope: OwnerScope, name: Optional[str], data: Any = None) -> Document:
        """Создание нового документа"""
        if not name or not name.strip():
            raise BadInput("Document name is required")

        async with self._guard("create document"):
            for _ in range(CREATE_ATTEMPTS):
                document = Document.create_document(name=name, owner=scope, data=data)
                async with self.locks.writer(document.id):
                    if await self.document_repository.exists(document.id):
                        continue
                    created = await self.document_repository.create(document)
                if created is not None:
                    logger.info(f"Document {created.id} created by {scope.account_id}")
                    return created
            raise StoreUnavailable("Could not allocate a document identifier")

    async def get(self, scope: OwnerScope, document_id: str) -> Document:
        """Получение документа с учетом области владения"""
        async with self._guard("read document"):
            await self.locks.wait_unlocked(document_id)
            document = await self.document_repository.get_by_id(
                document_id, owner_id=self._owner_filter(scope)
            )

        if document is None:
            raise NotFound()
        return document

    async def update(self, scope: OwnerScope, document_id: str, update_data: DocumentUpdate) -> Document:
        """Частичное обновление: меняются только переданные поля"""
        async with self._guard("update document"):
            async with self.locks.writer(document_id):
                document = await self.document_repository.get_by_id(
                    document_id, owner_id=self._owner_filter(scope)
                )
                if document is None:
                    raise NotFound()

                if update_data.name:
                    document.rename(update_data.name)
                if update_data.data is not None:
                    document.replace_data(update_data.data)
                document.touch()

                updated = await self.document_repository.update(document)

        logger.info(f"Document {document_id} updated by {scope.account_id}")
        return updated

    async def delete(self, scope: OwnerScope, document_id: str) -> None:
        """Удаление документа"""
        async with self._guard("delete document"):
            async with self.locks.writer(document_id):
                deleted = await self.document_repository.delete(
                    document_id, owner_id=self._owner_filter(scope)
                )

        if not deleted:
            raise NotFound()
        logger.info(f"Document {document_id} deleted by {scope.account_id}")

    async def list(self, scope: OwnerScope) -> List[Document]:
        """Документы области; для административной области - все"""
        async with self._guard("list documents"):
            return await self.document_repository.list(owner_id=self._owner_filter(scope))


class PublicProjection:
    """Публичное чтение: только содержимое документа, без метаданных"""

    def __init__(self, documents: DocumentService):
        self.documents = documents

    async def get_content(self, document_id: str) -> Any:
        document = await self.documents.get(OwnerScope.unscoped(), document_id)
        return document.data
