import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mdblog.errors import BlogError, StorageIOError, ValidationError
from mdblog.routers import posts
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mdblog API", description="Markdown blog posts over REST")

app.include_router(posts.router, prefix=settings.API_PREFIX)


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "kind": exc.kind},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"error": "Invalid request body", "kind": ValidationError.kind},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=StorageIOError.status_code,
        content={"error": "Internal server error", "kind": StorageIOError.kind},
    )


@app.get("/")
async def root():
    return {"message": "mdblog API is running"}
