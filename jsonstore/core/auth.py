from typing import Optional

from fastapi import Security
from fastapi.security import APIKeyHeader, APIKeyQuery

from jsonstore.core.security import extract_api_key

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)
api_key_query = APIKeyQuery(name="api_key", auto_error=False)


async def get_credential(
    header_key: Optional[str] = Security(api_key_header),
    query_key: Optional[str] = Security(api_key_query)
) -> Optional[str]:
    """Ключ запроса; проверку выполняет IdentityResolver"""
    return extract_api_key(header_key, query_key)
