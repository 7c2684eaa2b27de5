import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prepwise.api.v1.interview import interview_router
from prepwise.api.v1.vapi import vapi_router
from prepwise.core.config import settings
from prepwise.core.logger import setup_logger, set_correlation_id
from prepwise.core.exceptions import (
    AppError,
    app_error_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)

setup_logger(log_level=settings.LOG_LEVEL, clear_log=settings.LOG_CLEAR_ON_STARTUP, use_json=settings.LOG_JSON)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: PrepWise backend")
    yield
    logger.info("Application shutdown")

app = FastAPI(
    title="PrepWise",
    description="AI mock-interview generation and feedback backend.",
    version="1.0.0",
    debug=settings.DEBUG_MODE,
    lifespan=lifespan
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_correlation_id(correlation_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = correlation_id
    return response


# Voice-agent tool endpoint keeps its historical path
app.include_router(vapi_router, prefix="/api", tags=["vapi"])
app.include_router(interview_router, prefix="/api/v1", tags=["interview"])
