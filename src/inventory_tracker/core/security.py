# src/inventory_tracker/core/security.py
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from inventory_tracker.core.config import Settings, get_settings

_API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=True)


async def get_client_id(
    api_key: str = Security(_API_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    FastAPI dependency: validates the API key and returns the client name.
    Raises HTTP 401 for unknown keys.
    """
    client_id = settings.api_keys.get(api_key)
    if client_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key.",
            headers={"WWW-Authenticate": "ApiKey"},
        )
    return client_id
