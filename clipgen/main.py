"""
FastAPI entrypoint for the narrated clip generator.

The same pipeline is available from the command line via run_generation.py.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clipgen.api.routes_video import router as videos_router
from clipgen.core.config import settings
from clipgen.core.logging_config import configure_logging, get_logger

configure_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Video model: {settings.video_model}, TTS model: {settings.tts_model}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; generation requests will fail")
    logger.info("=" * 60)
    yield
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Generates short video clips with optional spoken narration",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(videos_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "endpoints": {
            "generate_video": "/videos/generate",
            "styles": "/videos/styles",
            "languages": "/videos/languages",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "clipgen.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
