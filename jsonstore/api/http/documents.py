from typing import Optional

from fastapi import APIRouter, Depends, status

from jsonstore.api.deps import get_authorization_gate
from jsonstore.api.responses import success
from jsonstore.core.auth import get_credential
from jsonstore.domains.documents.entities import Document
from jsonstore.domains.documents.gate import AuthorizationGate
from jsonstore.domains.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse

router = APIRouter(prefix="/api/documents", tags=["documents"])


def _serialize(document: Document) -> dict:
    return DocumentResponse.model_validate(document).model_dump(mode="json")


@router.get("")
async def list_documents(
    credential: Optional[str] = Depends(get_credential),
    gate: AuthorizationGate = Depends(get_authorization_gate)
):
    """Список документов вызывающего"""
    documents = await gate.list(credential)
    return success([_serialize(document) for document in documents])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    credential: Optional[str] = Depends(get_credential),
    gate: AuthorizationGate = Depends(get_authorization_gate)
):
    """Создание нового документа"""
    document = await gate.create(credential, document_data.name, document_data.data)
    return success(_serialize(document), message="Document created successfully")


@router.get("/{document_id}")
async def get_document(
    document_id: str,
    credential: Optional[str] = Depends(get_credential),
    gate: AuthorizationGate = Depends(get_authorization_gate)
):
    """Получение документа по id"""
    document = await gate.get(credential, document_id)
    return success(_serialize(document))


@router.put("/{document_id}")
async def update_document(
    document_id: str,
    update_data: DocumentUpdate,
    credential: Optional[str] = Depends(get_credential),
    gate: AuthorizationGate = Depends(get_authorization_gate)
):
    """Частичное обновление документа"""
    document = await gate.update(credential, document_id, update_data)
    return success(_serialize(document), message="Document updated")


@router.delete("/{document_id}")
async def delete_document(
    document_id: str,
    credential: Optional[str] = Depends(get_credential),
    gate: AuthorizationGate = Depends(get_authorization_gate)
):
    """Удаление документа"""
    await gate.delete(credential, document_id)
    return success(message="Document deleted")
