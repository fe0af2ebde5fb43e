from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.core.errors import CorruptRecord, StoreUnavailable
from jsonstore.db.models.document import Document as DocumentModel
from jsonstore.domains.documents.entities import Document, as_utc


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: Document) -> Optional[Document]:
        """Сохранение нового документа; None при конфликте идентификатора"""
        db_document = DocumentModel(
            id=document.id,
            user_id=document.user_id,
            name=document.name,
            data=document.data,
            created_at=document.created_at,
            updated_at=document.updated_at
        )

        self.session.add(db_document)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return None
        return document

    async def exists(self, document_id: str) -> bool:
        result = await self.session.execute(
            select(DocumentModel.id).where(DocumentModel.id == document_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_by_id(self, document_id: str, owner_id: Optional[str] = None) -> Optional[Document]:
        """Получение документа по id, с фильтром по владельцу если он задан"""
        query = (
            select(DocumentModel)
            .where(DocumentModel.id == document_id)
            .execution_options(populate_existing=True)
        )
        if owner_id is not None:
            query = query.where(DocumentModel.user_id == owner_id)

        result = await self.session.execute(query)
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def list(self, owner_id: Optional[str] = None) -> List[Document]:
        """Все документы владельца, либо все документы системы"""
        query = select(DocumentModel).execution_options(populate_existing=True)
        if owner_id is not None:
            query = query.where(DocumentModel.user_id == owner_id)

        result = await self.session.execute(
            query.order_by(DocumentModel.updated_at.desc(), DocumentModel.id)
        )
        return [self._to_domain(doc) for doc in result.scalars().all()]

    async def update(self, document: Document) -> Document:
        """Запись изменяемых полей документа"""
        db_document = await self.session.get(DocumentModel, document.id)
        if db_document is None:
            raise StoreUnavailable("Document vanished during update")

        db_document.name = document.name
        db_document.data = document.data
        db_document.updated_at = document.updated_at
        await self.session.commit()
        return document

    async def delete(self, document_id: str, owner_id: Optional[str] = None) -> bool:
        """Удаление документа"""
        stmt = delete(DocumentModel).where(DocumentModel.id == document_id)
        if owner_id is not None:
            stmt = stmt.where(DocumentModel.user_id == owner_id)

        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        if db_document.name is None or db_document.data is None or db_document.user_id is None:
            raise CorruptRecord(f"Document {db_document.id} is missing required fields")

        return Document(
            id=db_document.id,
            name=db_document.name,
            data=db_document.data,
            user_id=db_document.user_id,
            created_at=as_utc(db_document.created_at),
            updated_at=as_utc(db_document.updated_at)
        )
