from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from jsonstore.api.deps import get_public_projection
from jsonstore.domains.documents.services import PublicProjection

router = APIRouter(prefix="/public", tags=["public"])

PUBLIC_CACHE_CONTROL = "public, max-age=60"


@router.get("/{document_id}")
async def get_public_document(
    document_id: str,
    projection: PublicProjection = Depends(get_public_projection)
):
    """Публичное содержимое документа без конверта и метаданных"""
    content = await projection.get_content(document_id)
    return JSONResponse(content=content, headers={"Cache-Control": PUBLIC_CACHE_CONTROL})
