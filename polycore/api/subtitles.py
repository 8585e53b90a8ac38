import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from polycore.application.use_cases import FetchSubtitlesUseCase
from polycore.infrastructure.providers import get_subtitles_use_case

router = APIRouter()
log = logging.getLogger("polycore.subtitles")


@router.get("/api/subtitles")
async def get_subtitles(
    request: Request,
    use_case: FetchSubtitlesUseCase = Depends(get_subtitles_use_case),
) -> JSONResponse:
    params = dict(request.query_params)
    log.info(
        "[SUBTITLES] request ip=%s params=%s",
        getattr(request.client, "host", None),
        params,
    )
    envelope = await use_case.execute(params)
    return JSONResponse(status_code=200, content=envelope)
