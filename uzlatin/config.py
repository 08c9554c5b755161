"""Configuration management using Pydantic Settings"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Translation provider
    openai_api_key: Optional[str] = None
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    default_model: str = "gpt-4o-mini"
    request_timeout: float = 60.0

    # Proxy mode passes the client's messages through untouched
    proxy_temperature: float = 0.7

    # Optional bearer token clients must present (disabled when unset)
    client_token: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS
    allowed_origins: str = "*"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",")]


# Global settings instance
settings = Settings()
