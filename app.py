"""
FastAPI application for the "future face" generator.

A child's photo and a gender go in, Gemini renders the child as an adult in
their twenties, and the first generated image comes back as a data URL.

Endpoints:
- POST /api/generate
- GET /healthz
"""
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Config
from image.routes import router as image_router
from utils.logger import get_logger
from common.error_messages import ErrorCode, get_error_response

# Initialize logger
logger = get_logger("main")

# Validate configuration on startup; the key is re-read on every request
try:
    Config.validate()
    logger.info("Configuration validated successfully")
except ValueError as e:
    logger.warning(f"Configuration error: {e}")
    logger.warning("Set GEMINI_API_KEY in the environment or .env file; /api/generate returns 500 until then")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info("=" * 80)
    logger.info("Future Face API starting up")
    logger.info(f"Model: {Config.GEMINI_MODEL}")
    logger.info(f"Host: {Config.HOST}:{Config.PORT}")
    logger.info("=" * 80)
    yield
    logger.info("Future Face API shutting down")


# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Future Face API",
    description="Generates a realistic adult version of a child's photo with Gemini.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error (including router 404/405) as {"error": message}."""
    detail = exc.detail
    if exc.status_code == 405:
        detail, _ = get_error_response(ErrorCode.METHOD_NOT_ALLOWED)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON bodies are a bad request, not 422."""
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    message, status_code = get_error_response(ErrorCode.INVALID_FORMAT)
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions globally."""
    if isinstance(exc, HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    message, status_code = get_error_response(ErrorCode.IMAGE_GENERATION_FAILED)
    return JSONResponse(status_code=status_code, content={"error": message})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every HTTP request with status and timing."""
    start_time = time.time()
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"→ {request.method} {request.url.path} - Client: {client_host}")

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.error(f"← {request.method} {request.url.path} - Error: {e} - Time: {process_time:.2f}ms")
        raise

    process_time = (time.time() - start_time) * 1000
    logger.info(f"← {request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.2f}ms")
    return response


app.include_router(image_router)
logger.info("Image router included")


@app.get("/healthz")
def health():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {"status": "ok"}


# Run server directly
if __name__ == "__main__":
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT}")
    uvicorn.run(
        "app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.RELOAD,
        log_level="info"
    )
