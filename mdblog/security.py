import logging

from fastapi import Depends, Security
from fastapi.security.api_key import APIKeyHeader

from mdblog.errors import AuthError
from mdblog.schemas.blog import AuthStatus
from mdblog.settings import Settings, settings

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = "X-Admin-Token"
admin_token_header = APIKeyHeader(name=ADMIN_TOKEN_HEADER, auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def require_admin_token(
    token: str | None = Security(admin_token_header),
    current_settings: Settings = Depends(get_settings),
):
    if not current_settings.BLOG_ADMIN_TOKEN:
        logger.warning("BLOG_ADMIN_TOKEN not set. Admin endpoints are open!")
        return None
    if token and token == current_settings.BLOG_ADMIN_TOKEN:
        return token
    raise AuthError("Unauthorized - Invalid or missing admin token")


def get_auth_status(current_settings: Settings) -> AuthStatus:
    return AuthStatus(
        mode=current_settings.mode,
        requiresAuth=current_settings.requires_auth,
        hasToken=current_settings.requires_auth,
    )
