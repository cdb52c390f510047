from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.api.endpoints.health import router as health_router
from backend.app.api.responses import envelope
from backend.app.api.router import router as api_router
from backend.app.core.config import settings
from backend.app.core.errors import ServiceError
from backend.app.core.logging import configure_logging
from backend.app.db.migrate import run_migrations

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.MIGRATE_ON_STARTUP:
        run_migrations()
    yield


app = FastAPI(title="Procurement System API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
)


@app.middleware("http")
async def log_and_recover(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(
            status_code=500,
            content=envelope(success=False, message="Internal server error"),
        )
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=envelope(success=False, message=exc.message))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content=envelope(success=False, message="Invalid request body"))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=envelope(success=False, message=str(exc.detail)))


app.include_router(health_router, tags=["system"])
app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("backend.app.main:app", host="0.0.0.0", port=settings.PORT, reload=False)
