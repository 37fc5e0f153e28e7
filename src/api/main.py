import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uuid

from src.api.routes import cuisine_router, regions_router
from configs import get_settings, Settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def configure_tracing(settings: Settings) -> bool:
    """Export Langsmith settings to the environment read by ``traceable``."""
    if not (settings.langchain_tracing_v2 and settings.langchain_api_key):
        return False
    os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
    os.environ.setdefault("LANGCHAIN_API_KEY", settings.langchain_api_key)
    os.environ.setdefault("LANGCHAIN_PROJECT", settings.langchain_project)
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(f"Starting Cultural Cuisine API on {settings.api_host}:{settings.api_port}")
    if configure_tracing(settings):
        logger.info(f"Langsmith tracing enabled for project {settings.langchain_project}")
    yield
    logger.info("Shutting down Cultural Cuisine API")


app = FastAPI(
    title="Cultural Cuisine API",
    description="Ingredient substitutions, authenticity scoring and regional dining guidance",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with logging."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "request_id": request_id
        }
    )


app.include_router(cuisine_router)
app.include_router(regions_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "cultural-cuisine-api"}


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Cultural Cuisine API",
        "version": "1.0.0",
        "endpoints": {
            "substitutions": "POST /cuisine/substitutions",
            "substitution_rule": "GET /cuisine/substitutions/{ingredient}",
            "authenticity": "POST /cuisine/authenticity",
            "guide": "POST /cuisine/guide",
            "regions": "GET /regions",
            "pairings": "GET /regions/{region_code}/pairings",
            "etiquette": "GET /regions/{region_code}/etiquette",
            "health": "GET /health"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
