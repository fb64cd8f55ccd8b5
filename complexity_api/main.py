"""
FastAPI application for the heuristic Complexity Analyzer.
"""
from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from complexity_api import __version__
from complexity_api.config import settings, logger
from complexity_api.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    LanguageInfo,
)
from complexity_engine import SUPPORTED_LANGUAGES, CodeComplexityAnalyzer


analyzer = CodeComplexityAnalyzer(default_language=settings.DEFAULT_LANGUAGE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info(f"Complexity Analyzer v{__version__} starting")
    logger.info(f"Server: {settings.HOST}:{settings.PORT}")
    logger.info(f"Languages: {', '.join(lang.id for lang in SUPPORTED_LANGUAGES)}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="Complexity Analyzer API",
    description="Heuristic code complexity analysis with optimization suggestions",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors without echoing submitted values."""
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in exc.errors()[:5]
    ]
    logger.warning(f"Validation error on {request.method} {request.url.path}: {error_details}")
    return JSONResponse(status_code=422, content={"success": False, "error": "Invalid request format"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {str(exc)[:200]}"
    )
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Complexity Analyzer API",
        "version": __version__,
        "status": "ok",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/languages", response_model=list[LanguageInfo])
async def languages():
    """List the supported languages."""
    return [
        LanguageInfo(
            id=lang.id,
            name=lang.name,
            extensions=list(lang.extensions),
            keywords=list(lang.keywords),
        )
        for lang in SUPPORTED_LANGUAGES
    ]


@app.post("/analyze", response_model=AnalyzeResponse, responses={
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
})
async def analyze_code(request: AnalyzeRequest):
    """
    Analyze code complexity.

    Accepts source code and returns:
    - Overall time complexity and efficiency score
    - Line-by-line complexity labels
    - Detected loop, nesting and recursion patterns
    - Prioritized improvement suggestions with example rewrites
    - Educational notes on the detected concepts
    """
    request_id = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    start_time = time.time()

    logger.info(f"[{request_id}] REQUEST RECEIVED - Code length: {len(request.code)} chars")

    try:
        result = analyzer.analyze(
            request.code,
            language=request.language,
            filename=request.filename,
        )
    except Exception as e:
        elapsed_time = time.time() - start_time
        logger.error(f"[{request_id}] REQUEST FAILED - Time taken: {elapsed_time:.3f}s - Error: {str(e)}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True),
        )

    if settings.ANALYSIS_DELAY_MS:
        await asyncio.sleep(settings.ANALYSIS_DELAY_MS / 1000)

    elapsed_time = time.time() - start_time
    logger.info(
        f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - "
        f"Result: {result.overall.time}, score {result.overall.score}"
    )

    return AnalyzeResponse(success=True, language=result.language, result=result)
