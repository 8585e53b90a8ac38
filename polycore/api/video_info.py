import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from polycore.application.serializers import success_envelope
from polycore.application.use_cases import GetVideoInfoUseCase
from polycore.infrastructure.providers import get_video_info_use_case

router = APIRouter()
log = logging.getLogger("polycore.video_info")


@router.get("/api/video-info/{video_id}")
async def get_video_info(
    video_id: str,
    use_case: GetVideoInfoUseCase = Depends(get_video_info_use_case),
) -> JSONResponse:
    log.info("[VIDEO_INFO] request video_id=%s", video_id)
    data, source = await use_case.execute(video_id)
    return JSONResponse(status_code=200, content=success_envelope(source, data=data))
