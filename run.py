import uvicorn

from polycore.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "polycore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
        access_log=True,
    )
