"""Translation endpoint router - translate and proxy modes"""
import json
import logging
import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from uzlatin.config import Settings
from uzlatin.dependencies import (
    get_provider,
    get_settings,
    get_translation_service,
    verify_client_token,
)
from uzlatin.models.request import ProxyRequest, TranslateRequest
from uzlatin.models.response import ProxyResponse, TranslateResponse
from uzlatin.services.provider import OpenAIChatProvider, ProviderTransportError
from uzlatin.services.translation_service import InvalidInputError, TranslationService
from uzlatin.utils.target_alias import DEFAULT_TARGET, resolve_target

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

BAD_REQUEST_HINT = "Use either { text, targetLang } for translate or { messages } for proxy."


def _bad_request() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Bad Request", "hint": BAD_REQUEST_HINT},
    )


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@router.get("/translate", response_class=PlainTextResponse)
async def translate_ping():
    """Liveness probe for the translate endpoint"""
    return "ok"


@router.post("/translate", dependencies=[Depends(verify_client_token)])
async def translate_text(
    request: Request,
    service: TranslationService = Depends(get_translation_service),
    provider: OpenAIChatProvider = Depends(get_provider),
    config: Settings = Depends(get_settings),
):
    """
    Translate text into Uzbek Latin, or proxy raw chat messages.

    - { text, targetLang }: translate mode, output forced to Uzbek Latin
    - { messages }: proxy mode, provider response returned untouched
    """
    start_time = time.time()

    try:
        raw_body = await request.body()
        body = json.loads(raw_body or b"{}")
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning(f"Unparseable request body: {e}")
        return _bad_request()

    if not isinstance(body, dict):
        return _bad_request()

    try:
        if isinstance(body.get("text"), str) and isinstance(body.get("targetLang"), str):
            payload = TranslateRequest(
                text=body["text"],
                targetLang=body["targetLang"] or DEFAULT_TARGET.label,
                model=body.get("model") if isinstance(body.get("model"), str) else None,
            )
            target = resolve_target(payload.targetLang)
            logger.info(f"Translating {len(payload.text)} chars into {target.code}")

            result = await service.translate(payload.text, target, model=payload.model)

            elapsed_time = time.time() - start_time
            logger.info(f"Translation request completed in {elapsed_time:.2f} seconds")
            return TranslateResponse(
                targetLang=payload.targetLang,
                targetLangCode=result.target_code,
                result=result.latin_text,
                result_ascii=result.ascii_text,
                result_b64=result.base64_latin,
                retried=result.was_retried,
            )

        if isinstance(body.get("messages"), list):
            payload = ProxyRequest(
                messages=body["messages"],
                model=body.get("model") if isinstance(body.get("model"), str) else None,
                temperature=body["temperature"] if _is_number(body.get("temperature")) else None,
            )
            forwarded = {
                "model": payload.model or config.default_model,
                "temperature": (
                    payload.temperature if payload.temperature is not None
                    else config.proxy_temperature
                ),
                "messages": payload.messages,
            }
            logger.info(f"Proxying {len(payload.messages)} messages to {forwarded['model']}")
            data = await provider.create_completion(forwarded)
            return ProxyResponse(data=data)

        return _bad_request()

    except (InvalidInputError, ValidationError) as e:
        logger.warning(f"Rejected request: {e}")
        return _bad_request()

    except ProviderTransportError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"error": "OpenAI error", "detail": e.detail},
        )

    except Exception as e:
        elapsed_time = time.time() - start_time
        logger.error(f"Translation request failed after {elapsed_time:.2f} seconds: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": str(e)},
        )
