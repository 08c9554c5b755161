"""Response models for the translation API"""
from pydantic import BaseModel, Field
from typing import Any


class TranslateResponse(BaseModel):
    """Response model for translate mode"""

    ok: bool = Field(default=True)
    mode: str = Field(default="translate")
    targetLang: str = Field(description="Target label as requested")
    targetLangCode: str = Field(description="Resolved target code")
    result: str = Field(description="Translation in canonical Uzbek Latin")
    result_ascii: str = Field(description="Printable-ASCII rendition of result")
    result_b64: str = Field(description="Base64 of the UTF-8 bytes of result")
    retried: bool = Field(default=False, description="Whether the strict retry produced the result")

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "ok": True,
                "mode": "translate",
                "targetLang": "Uzbek (Latin)",
                "targetLangCode": "uz-Latn",
                "result": "Salom, doʻstim!",
                "result_ascii": "Salom, do'stim!",
                "result_b64": "U2Fsb20sIGRvyrtzdGltIQ==",
                "retried": False
            }]
        }
    }


class ProxyResponse(BaseModel):
    """Response model for proxy mode"""

    ok: bool = Field(default=True)
    mode: str = Field(default="proxy")
    data: Any = Field(description="Provider response body, untouched")
