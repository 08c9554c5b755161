"""API dependencies for authentication and service wiring.

Services are built from the process-wide settings and handed to the
routers through FastAPI's dependency system, so tests can swap any of
them with app.dependency_overrides.
"""
import logging
import secrets
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from uzlatin.config import Settings, settings
from uzlatin.services.provider import OpenAIChatProvider
from uzlatin.services.translation_service import TranslationService

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Return the global settings instance."""
    return settings


async def verify_client_token(
    authorization: Annotated[Optional[str], Header()] = None,
    config: Settings = Depends(get_settings),
) -> bool:
    """Check the bearer token when CLIENT_TOKEN is configured.

    Raises:
        HTTPException: 401 if a token is configured and the request does not carry it
    """
    if not config.client_token:
        return True

    auth = authorization or ""
    incoming = auth[len("Bearer "):] if auth.startswith("Bearer ") else ""
    if not secrets.compare_digest(incoming.encode("utf-8"), config.client_token.encode("utf-8")):
        logger.warning("Rejected request with missing or invalid bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "Unauthorized"},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return True


def get_provider(config: Settings = Depends(get_settings)) -> OpenAIChatProvider:
    """Build the provider client.

    Raises:
        HTTPException: 500 if no provider API key is configured
    """
    if not config.openai_api_key:
        logger.error("OPENAI_API_KEY is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Missing OPENAI_API_KEY"},
        )
    return OpenAIChatProvider(
        api_key=config.openai_api_key,
        api_url=config.openai_api_url,
        timeout=config.request_timeout,
    )


def get_translation_service(
    provider: OpenAIChatProvider = Depends(get_provider),
    config: Settings = Depends(get_settings),
) -> TranslationService:
    """Build the translation service around the provider client."""
    return TranslationService(provider=provider, default_model=config.default_model)
