"""Audio encoder - wraps raw PCM samples from the TTS model into a WAV container."""

import base64
import io
import wave
from dataclasses import dataclass

from clipgen.core.exceptions import EncodingError

DEFAULT_CHANNELS = 1
DEFAULT_SAMPLE_RATE = 24000
DEFAULT_BIT_DEPTH = 16

SUPPORTED_BIT_DEPTHS = (8, 16, 24, 32)


@dataclass(frozen=True)
class WavHeader:
    """Format fields read back from a WAV container."""

    channels: int
    sample_rate: int
    bit_depth: int
    frames: int

    @property
    def duration_seconds(self) -> float:
        if not self.sample_rate:
            return 0.0
        return self.frames / self.sample_rate


async def encode_wav(
    pcm: bytes,
    channels: int = DEFAULT_CHANNELS,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    bit_depth: int = DEFAULT_BIT_DEPTH,
) -> str:
    """
    Wrap linear PCM samples in a WAV container and base64-encode the result.

    The writer emits the header and sample data into an in-memory buffer; the
    buffer is only read after the writer is closed, so the header sizes are final.

    Args:
        pcm: Raw little-endian PCM sample bytes
        channels: Channel count (default: mono)
        sample_rate: Sample rate in Hz (default: 24000)
        bit_depth: Bits per sample (default: 16)

    Returns:
        Base64 text of the complete WAV container

    Raises:
        EncodingError: If the input is malformed or the writer fails
    """
    if not isinstance(pcm, (bytes, bytearray, memoryview)):
        raise EncodingError(f"PCM data must be bytes, got {type(pcm).__name__}")
    if channels < 1:
        raise EncodingError(f"Channel count must be positive, got {channels}")
    if sample_rate < 1:
        raise EncodingError(f"Sample rate must be positive, got {sample_rate}")
    if bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise EncodingError(f"Unsupported bit depth: {bit_depth}")

    frame_size = channels * (bit_depth // 8)
    if len(pcm) % frame_size != 0:
        raise EncodingError(
            f"PCM length {len(pcm)} is not a whole number of {frame_size}-byte frames"
        )

    buffer = io.BytesIO()
    try:
        with wave.open(buffer, "wb") as writer:
            writer.setnchannels(channels)
            writer.setsampwidth(bit_depth // 8)
            writer.setframerate(sample_rate)
            writer.writeframes(bytes(pcm))
    except (wave.Error, OSError, ValueError) as e:
        raise EncodingError(f"Failed to write WAV container: {e}") from e

    return base64.b64encode(buffer.getvalue()).decode("ascii")


def read_wav_header(data: bytes) -> WavHeader:
    """
    Parse the format fields of a WAV container.

    Raises:
        EncodingError: If the data is not a readable WAV container
    """
    try:
        with wave.open(io.BytesIO(data), "rb") as reader:
            return WavHeader(
                channels=reader.getnchannels(),
                sample_rate=reader.getframerate(),
                bit_depth=reader.getsampwidth() * 8,
                frames=reader.getnframes(),
            )
    except (wave.Error, EOFError) as e:
        raise EncodingError(f"Not a valid WAV container: {e}") from e
