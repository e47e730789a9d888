from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.api import api_router
from core.config import configs
from core.dependencies import TripLockRegistry
from core.logger import setup_logging
from app.autosort.schema import ErrorResponse
from app.common.exceptions import AutosortError, InvalidDataError

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🔧 Initializing Trip Autosort Service...")
    app.state.trip_locks = TripLockRegistry()
    logger.info("✅ Trip Autosort Service initialized.")
    yield
    # Shutdown
    logger.info("🛑 Shutting down Trip Autosort Service...")

app = FastAPI(
    title=configs.PROJECT_NAME,
    description="Trip media autosort by capture time and location",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS (Allow all for development env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=configs.API_PREFIX)


def _error_response(request: Request, status: int, message: str) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        status=status,
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
    )
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


@app.exception_handler(InvalidDataError)
async def invalid_data_handler(request: Request, exc: InvalidDataError):
    logger.warning(f"Bad request: {exc}")
    return _error_response(request, 400, str(exc) or "Bad request")


@app.exception_handler(AutosortError)
async def autosort_error_handler(request: Request, exc: AutosortError):
    logger.warning(f"Autosort failed: {exc}")
    return _error_response(request, 422, "Autosort failed")


@app.get("/")
async def root():
    return {"message": "Trip Autosort Service Running"}

@app.get("/health")
async def health_check():
    return {"status": "ok"}
