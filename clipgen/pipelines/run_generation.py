"""Command-line pipeline - prompt → video + narration files on disk."""

import argparse
import asyncio
import binascii
import sys
import time
from pathlib import Path
from typing import Any, Optional

from clipgen.core.config import Settings, settings
from clipgen.core.exceptions import EncodingError, VideoGenerationError
from clipgen.core.logging_config import configure_logging, get_logger
from clipgen.models.schemas import AspectRatio, GenerationRequest, GenerationResult, LanguageCode
from clipgen.services.audio_encoder import read_wav_header
from clipgen.services.catalog import list_styles, resolve_style
from clipgen.services.generation_coordinator import GenerationCoordinator
from clipgen.utils.error_handler import format_error_message, get_fallback_suggestion
from clipgen.utils.io_utils import create_run_output_dir, parse_data_uri, slugify, write_data_uri


def save_result(result: GenerationResult, output_dir: Path, logger: Any) -> dict[str, Optional[Path]]:
    """
    Write the generated assets to disk.

    Args:
        result: Generation result with data URIs
        output_dir: Directory for this run
        logger: Logger instance

    Returns:
        Paths of the written video and narration (None when there is no narration)
    """
    video_path = write_data_uri(result.video_asset, output_dir, "video")
    logger.info(f"Video saved: {video_path}")

    audio_path = None
    if result.audio_asset:
        audio_path = write_data_uri(result.audio_asset, output_dir, "narration")
        try:
            _, wav_bytes = parse_data_uri(result.audio_asset)
            header = read_wav_header(wav_bytes)
            logger.info(
                f"Narration saved: {audio_path} ({header.duration_seconds:.2f}s, "
                f"{header.sample_rate} Hz, {header.bit_depth}-bit)"
            )
        except (EncodingError, ValueError, binascii.Error) as e:
            logger.warning(f"Narration saved but could not be inspected: {e}")
    else:
        logger.info("No narration produced")

    return {"video_path": video_path, "audio_path": audio_path}


async def generate_clip(request: GenerationRequest, settings: Settings, logger: Any) -> GenerationResult:
    """Run the coordinator for a single request."""
    coordinator = GenerationCoordinator(settings, logger)
    return await coordinator.run(request)


def main():
    """Main entrypoint for clip generation."""
    style_names = ", ".join(style.name for style in list_styles())
    parser = argparse.ArgumentParser(
        description="Narrated Clip Generator - text prompt to video with optional narration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--prompt", type=str, required=True, help="Description of the video to generate")
    parser.add_argument(
        "--narration",
        type=str,
        default=None,
        help="Text to speak as narration (omit for a silent clip)",
    )
    parser.add_argument(
        "--style",
        type=str,
        default=None,
        help=f"Visual style: a catalog name or id ({style_names}) or any free-form description",
    )
    parser.add_argument(
        "--aspect-ratio",
        type=str,
        default=AspectRatio.LANDSCAPE.value,
        choices=[ratio.value for ratio in AspectRatio],
        help="Video aspect ratio (default: 16:9)",
    )
    parser.add_argument(
        "--language",
        type=str,
        default=LanguageCode.ENGLISH.value,
        choices=[code.value for code in LanguageCode],
        help="Narration language (default: en)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Output directory (default: {settings.output_dir})",
    )
    args = parser.parse_args()

    configure_logging(settings)
    logger = get_logger(__name__, stage="cli")

    try:
        request = GenerationRequest(
            prompt=args.prompt,
            narration_text=args.narration,
            style_description=resolve_style(args.style),
            aspect_ratio=AspectRatio(args.aspect_ratio),
            language_code=LanguageCode(args.language),
        )
    except ValueError as e:
        logger.error(f"Invalid request: {e}")
        return 1

    logger.info("=" * 60)
    logger.info("Starting clip generation")
    logger.info(f"Prompt: {request.prompt[:120]}")
    logger.info(f"Style: {request.style_description or settings.default_style}")
    logger.info("=" * 60)

    start_time = time.time()
    try:
        result = asyncio.run(generate_clip(request, settings, logger))

        output_dir = create_run_output_dir(args.output_dir or settings.output_dir, slugify(request.prompt))
        save_result(result, output_dir, logger)

        logger.info("=" * 60)
        logger.info(f"Clip generation complete in {time.time() - start_time:.2f}s")
        logger.info(f"Output: {output_dir}")
        logger.info("=" * 60)
        return 0

    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user")
        return 1
    except VideoGenerationError as e:
        logger.error(
            format_error_message(
                "Generating video",
                e,
                context={"aspect_ratio": request.aspect_ratio.value},
                suggestion=get_fallback_suggestion("Video Generation", e),
            )
        )
        return 1
    except Exception as e:
        logger.exception(f"Clip generation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
