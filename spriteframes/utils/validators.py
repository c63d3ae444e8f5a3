"""Validation helpers for frame sequence inputs."""

from __future__ import annotations

from typing import Any

from ..core.errors import InvalidFrameCountError, MissingFieldError, UnsupportedExtensionError


SUPPORTED_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png")
MIN_SEQUENCE_DIGITS = 2


def require_frame_path(frame_path: Any) -> str:
    """Ensure the example frame path is set."""

    if not frame_path:
        raise MissingFieldError("Frame path is not defined")
    if not isinstance(frame_path, str):
        raise MissingFieldError(f"Frame path must be a string, got {type(frame_path).__name__}")
    return frame_path


def require_frame_count(frame_count: Any) -> int:
    """Ensure the frame count is set and is a positive integer."""

    if not frame_count:
        raise MissingFieldError("Frame count is not defined")
    if isinstance(frame_count, bool) or not isinstance(frame_count, int):
        raise InvalidFrameCountError(f"Frame count must be an integer, got {frame_count!r}")
    if frame_count < 1:
        raise InvalidFrameCountError(f"Frame count must be greater than zero, got {frame_count}")
    return frame_count


def validate_extension(extension: str) -> str:
    """Check an extension token (no dot) against the whitelist, case-sensitively."""

    if extension not in SUPPORTED_IMAGE_EXTENSIONS:
        raise UnsupportedExtensionError(extension)
    return f".{extension}"


def decimal_length(value: int) -> int:
    """Number of characters in the base-10 representation of ``value``."""

    return len(str(value))
