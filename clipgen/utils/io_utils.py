"""I/O utility functions for file and directory operations."""

import base64
import mimetypes
import re
from datetime import datetime
from pathlib import Path

EXTENSION_OVERRIDES = {
    "video/mp4": ".mp4",
    "video/webm": ".webm",
    "audio/wav": ".wav",
    "audio/x-wav": ".wav",
}


def slugify(text: str) -> str:
    """
    Convert text to a filesystem-safe slug.

    Args:
        text: Input text to slugify.

    Returns:
        Filesystem-safe slug string.
    """
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", "-", text)
    text = text.strip("-")
    if len(text) > 60:
        text = text[:60].rstrip("-")
    return text or "clip"


def create_run_output_dir(base_dir: str, slug: str) -> Path:
    """
    Create a timestamped output directory for a generation run.

    Args:
        base_dir: Base directory for outputs (e.g., "outputs/clips").
        slug: Slugified identifier for the run (e.g., from the prompt).

    Returns:
        Path to the created directory.
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    output_dir = Path(base_dir) / f"{timestamp}_{slug}"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def parse_data_uri(data_uri: str) -> tuple[str, bytes]:
    """
    Split a base64 data URI into its MIME type and decoded bytes.

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    if not data_uri.startswith("data:"):
        raise ValueError("Not a data URI")
    header, sep, payload = data_uri.partition(",")
    if not sep or ";base64" not in header:
        raise ValueError("Data URI is not base64-encoded")
    mime_type = header[len("data:"):].split(";", 1)[0] or "application/octet-stream"
    return mime_type, base64.b64decode(payload)


def write_data_uri(data_uri: str, output_dir: Path, stem: str) -> Path:
    """Decode a data URI and write it to ``output_dir/stem.<ext>``."""
    mime_type, data = parse_data_uri(data_uri)
    extension = EXTENSION_OVERRIDES.get(mime_type) or mimetypes.guess_extension(mime_type) or ".bin"
    output_path = Path(output_dir) / f"{stem}{extension}"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
