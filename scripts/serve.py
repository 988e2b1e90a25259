import uvicorn

from mdblog.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "mdblog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
