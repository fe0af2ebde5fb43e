from typing import Any, List, Optional

from jsonstore.domains.documents.entities import Document
from jsonstore.domains.documents.schemas import DocumentUpdate
from jsonstore.domains.documents.services import DocumentService
from jsonstore.domains.identity.services import IdentityResolver


class AuthorizationGate:
    """Связка резолвера ключей и хранилища документов.

    Ключ проверяется до обращения к хранилищу; ошибка резолвера
    прерывает операцию. Правило видимости остается в DocumentService.
    """

    def __init__(self, resolver: IdentityResolver, documents: DocumentService):
        self.resolver = resolver
        self.documents = documents

    async def list(self, credential: Optional[str]) -> List[Document]:
        scope = await self.resolver.resolve(credential)
        return await self.documents.list(scope)

    async def create(self, credential: Optional[str], name: Optional[str], data: Any = None) -> Document:
        scope = await self.resolver.resolve(credential)
        return await self.documents.create(scope, name, data)

    async def get(self, credential: Optional[str], document_id: str) -> Document:
        scope = await self.resolver.resolve(credential)
        return await self.documents.get(scope, document_id)

    async def update(self, credential: Optional[str], document_id: str, update_data: DocumentUpdate) -> Document:
        scope = await self.resolver.resolve(credential)
        return await self.documents.update(scope, document_id, update_data)

    async def delete(self, credential: Optional[str], document_id: str) -> None:
        scope = await self.resolver.resolve(credential)
        await self.documents.delete(scope, document_id)
