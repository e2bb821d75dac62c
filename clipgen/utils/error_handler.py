"""Error Handler - provides user-friendly error messages for failed generations."""

from typing import Optional

from clipgen.core.exceptions import (
    ConfigurationError,
    DownloadError,
    GenerationTimeoutError,
    InitiationError,
    OperationFailedError,
    PollError,
    ProtocolViolationError,
)


def format_error_message(
    operation: str,
    error: Exception,
    context: Optional[dict] = None,
    suggestion: Optional[str] = None,
) -> str:
    """
    Format a user-friendly error message.

    Args:
        operation: What operation was being performed (e.g., "Generating video")
        error: The exception that occurred
        context: Additional context (e.g., {"aspect_ratio": "16:9", "language": "hi"})
        suggestion: Optional suggestion for how to fix the issue

    Returns:
        Formatted error message
    """
    error_type = type(error).__name__
    error_msg = str(error)

    context_str = ""
    if context:
        context_parts = [f"{k}={v}" for k, v in context.items()]
        context_str = f" ({', '.join(context_parts)})"

    message = f"❌ {operation} failed{context_str}\n"
    message += f"   Error: {error_type}: {error_msg}"

    if suggestion:
        message += f"\n   💡 Suggestion: {suggestion}"

    return message


def get_fallback_suggestion(service: str, error: Exception) -> Optional[str]:
    """
    Get a suggestion for how to handle a service failure.

    Args:
        service: Service name ("Video Generation" or "Narration")
        error: The exception

    Returns:
        Suggestion string or None
    """
    error_msg = str(error).lower()

    if service == "Video Generation":
        if isinstance(error, ConfigurationError) or "api key" in error_msg:
            return "Check GEMINI_API_KEY in your .env file."
        if isinstance(error, GenerationTimeoutError):
            return "The provider is slow right now. Raise VIDEO_POLL_TIMEOUT_SECONDS or try again later."
        if "quota" in error_msg or "rate limit" in error_msg or "429" in error_msg:
            return "Quota or rate limit exceeded. Wait a few minutes and try again."
        if isinstance(error, InitiationError):
            return "The video job could not be started. Check the prompt and your model access."
        if isinstance(error, PollError):
            return "Lost contact with the provider while waiting. Check your connection and retry."
        if isinstance(error, OperationFailedError):
            return "The provider rejected the job. Try rephrasing the prompt."
        if isinstance(error, ProtocolViolationError):
            return "The provider returned no video. Retrying usually helps."
        if isinstance(error, DownloadError):
            return "The video was generated but could not be downloaded. Retry the request."
        return "Video generation failed. Check logs for details."

    elif service == "Narration":
        if "api key" in error_msg or "not configured" in error_msg:
            return "Check GEMINI_API_KEY in your .env file. The clip will have no narration."
        elif "rate limit" in error_msg or "429" in error_msg:
            return "Rate limit exceeded. The clip will have no narration."
        else:
            return "Narration failed. The clip will have no narration."

    return None
