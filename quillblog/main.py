import logging
import os
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from sqlalchemy import text
from sqlalchemy.orm import Session

from quillblog.api.api import api_router
from quillblog.api import deps
from quillblog.core.config import settings, log_settings
from quillblog.core.errors import BlogError, InternalError, ValidationError
from quillblog.db.base import Base
from quillblog.db.session import engine

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application is starting up")
    log_settings(settings)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
    yield
    engine.dispose()
    logger.info("Application is shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan
)

app.include_router(api_router, prefix=settings.API_PREFIX)
logger.info("API router included")

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added with origins: {settings.BACKEND_CORS_ORIGINS}")
else:
    logger.warning("No CORS origins specified. CORS middleware not added.")


@app.get(f"{settings.API_PREFIX}/health")
def health_check(db: Session = Depends(deps.get_db)):
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "database": "disconnected"}
        )
    return {"status": "ok", "database": "connected"}


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(part for part in error["loc"] if isinstance(part, str) and part != "body") or "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    error = ValidationError(errors=errors)
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=error.status_code, content=jsonable_encoder(error.to_dict()))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.middleware("http")
async def add_request_id_header(request: Request, call_next):
    request_id = str(uuid.uuid4())
    logger.info(f"Request {request_id}: {request.method} {request.url}")
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    logger.info(f"Response {request_id}: Status {response.status_code}")
    return response


def run_server():
    environment = os.getenv("ENVIRONMENT", settings.ENVIRONMENT)
    logger.info(f"Running server in {environment} environment")
    port = int(os.getenv("PORT", settings.PORT))
    if environment == "development":
        uvicorn.run("quillblog.main:app", host=settings.HOST, port=port, reload=True)
    else:
        uvicorn.run(app, host=settings.HOST, port=port, proxy_headers=True)


if __name__ == "__main__":
    run_server()
