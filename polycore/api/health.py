from fastapi import APIRouter

router = APIRouter()

HEALTH_MESSAGE = "PolyCore YouTube API is running"


@router.get("/api/health")
def health():
    return {"status": "OK", "message": HEALTH_MESSAGE}
