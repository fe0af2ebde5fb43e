from typing import Optional

from fastapi import APIRouter, Depends

from jsonstore.api.deps import get_identity_resolver
from jsonstore.api.responses import success
from jsonstore.core.auth import get_credential
from jsonstore.domains.documents.entities import GLOBAL_OWNER
from jsonstore.domains.identity.services import IdentityResolver

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/me")
async def get_me(
    credential: Optional[str] = Depends(get_credential),
    resolver: IdentityResolver = Depends(get_identity_resolver)
):
    """Информация о владельце ключа"""
    account = await resolver.resolve_account(credential)
    if account is None:
        return success({"id": GLOBAL_OWNER, "type": "api_key"})
    return success(account.to_public_dict())
