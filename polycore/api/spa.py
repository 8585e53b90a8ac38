import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from polycore.application.serializers import error_envelope
from polycore.config import Settings, get_settings

router = APIRouter()
log = logging.getLogger("polycore.spa")

INDEX_FILE = "index.html"


def _resolve_asset(static_dir: Path, full_path: str) -> Optional[Path]:
    if not full_path:
        return None
    root = static_dir.resolve()
    candidate = (root / full_path).resolve()
    # Refuse anything that escapes the bundle directory.
    if root != candidate and root not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_spa(full_path: str, settings: Settings = Depends(get_settings)):
    if full_path == "api" or full_path.startswith("api/"):
        return JSONResponse(status_code=404, content=error_envelope("not found"))

    asset = _resolve_asset(settings.static_dir, full_path)
    if asset is not None:
        return FileResponse(asset)

    index = settings.static_dir / INDEX_FILE
    if not index.is_file():
        log.warning("SPA bundle missing: %s", index)
        return JSONResponse(status_code=404, content=error_envelope("frontend build not found"))
    return FileResponse(index)
