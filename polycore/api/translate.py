import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from polycore.application.serializers import success_envelope
from polycore.application.use_cases import TranslateTextUseCase
from polycore.core.exceptions import ValidationError
from polycore.infrastructure.providers import get_translate_use_case

router = APIRouter()
log = logging.getLogger("polycore.translate")

DEFAULT_TARGET_LANGUAGE = "es"


@router.post("/api/translate")
async def translate_text(
    request_body: Dict[str, Any],
    use_case: TranslateTextUseCase = Depends(get_translate_use_case),
) -> JSONResponse:
    text = request_body.get("text")
    target_language = request_body.get("targetLanguage") or DEFAULT_TARGET_LANGUAGE

    log.info("[TRANSLATE] request target=%s", target_language)

    if not isinstance(text, str) or not text.strip():
        raise ValidationError("text required")
    if not isinstance(target_language, str) or not target_language.strip():
        raise ValidationError("targetLanguage must be a non-empty string")

    translation, source = await use_case.execute(text, target_language.strip())

    return JSONResponse(
        status_code=200,
        content=success_envelope(source, translation=translation),
    )
