from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from techtrail.dependencies import get_settings
from techtrail.settings import Settings

API_KEY_NAME = "X-Techtrail-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_api_key(
    api_key_header: Optional[str] = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    # An unset key leaves the JSON API open
    if not current_settings.BLOG_API_KEY:
        return None
    if api_key_header == current_settings.BLOG_API_KEY:
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
