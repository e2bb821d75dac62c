"""FastAPI routes for clip generation."""

import uuid
from typing import Any

from fastapi import APIRouter, HTTPException

from clipgen.core.config import Settings
from clipgen.core.exceptions import VideoGenerationError
from clipgen.models.schemas import GenerationRequest, GenerationResult, LanguageOption, StyleOption
from clipgen.services.catalog import list_languages, list_styles
from clipgen.services.generation_coordinator import GenerationCoordinator

router = APIRouter(prefix="/videos", tags=["videos"])


def get_coordinator(settings: Settings, logger: Any) -> GenerationCoordinator:
    """Build a coordinator for one request."""
    return GenerationCoordinator(settings, logger)


@router.post("/generate", response_model=GenerationResult)
async def generate_video(request: GenerationRequest) -> GenerationResult:
    """
    Generate a video clip with optional narration.

    Video failures are returned as 502 with the failure message. Narration
    failures never fail the request; the response just has no audio.
    """
    from clipgen.core.config import settings
    from clipgen.core.logging_config import get_logger

    request_id = f"clip_{uuid.uuid4().hex[:12]}"
    logger = get_logger(__name__, request_id=request_id)
    logger.info(f"Generation request {request_id}: {request.prompt[:80]}")

    coordinator = get_coordinator(settings, logger)
    try:
        return await coordinator.run(request)
    except VideoGenerationError as e:
        logger.error(f"Generation request {request_id} failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error in request {request_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Video generation failed: {e}")


@router.get("/styles", response_model=list[StyleOption])
async def get_styles() -> list[StyleOption]:
    """List the selectable visual styles."""
    return list_styles()


@router.get("/languages", response_model=list[LanguageOption])
async def get_languages() -> list[LanguageOption]:
    """List supported narration languages."""
    return list_languages()
