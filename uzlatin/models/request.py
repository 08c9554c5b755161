"""Request models for the translation API"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class TranslateRequest(BaseModel):
    """Translate mode body for /api/translate"""

    text: str = Field(
        ...,
        description="Source text to translate"
    )

    targetLang: str = Field(
        default="Uzbek (Latin)",
        description="Target language label (any spelling of Uzbek Latin)"
    )

    model: Optional[str] = Field(
        default=None,
        description="Provider model override"
    )

    temperature: Optional[float] = Field(
        default=None,
        description="Accepted for compatibility; translation always runs at temperature 0"
    )

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "examples": [{
                "text": "Hello, my friend!",
                "targetLang": "Uzbek (Latin)"
            }]
        }
    }


class ProxyRequest(BaseModel):
    """Proxy mode body: chat messages forwarded to the provider as-is"""

    messages: List[Dict[str, Any]] = Field(
        ...,
        description="OpenAI-style chat messages"
    )

    model: Optional[str] = Field(
        default=None,
        description="Provider model override"
    )

    temperature: Optional[float] = Field(
        default=None,
        description="Sampling temperature (defaults to the configured proxy temperature)"
    )

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "examples": [{
                "messages": [{"role": "user", "content": "Salom!"}],
                "temperature": 0.7
            }]
        }
    }
