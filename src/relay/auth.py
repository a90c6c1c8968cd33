# Optional bearer-token check for the relay endpoints.
# With no RELAY_AUTH_TOKEN configured every caller is accepted.

from __future__ import annotations
import hmac
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.settings import Settings, settings

_bearer = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def require_bearer(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    cfg: Settings = Depends(get_settings),
) -> Optional[str]:
    expected = cfg.RELAY_AUTH_TOKEN
    if not expected:
        return None
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Missing bearer token", headers={"WWW-Authenticate": "Bearer"})
    if not hmac.compare_digest(credentials.credentials, expected):
        raise HTTPException(status_code=403, detail="Invalid bearer token")
    return credentials.credentials
