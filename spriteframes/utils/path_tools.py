"""String helpers for slash-separated frame paths."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def split_base_path(frame_path: str) -> tuple[str, str]:
    """Split a frame path into (base path with trailing slash, file name).

    A path without any separator still gets a base path of ``"/"``; callers
    concatenate it with frame names as-is.
    """

    segments = frame_path.split(SEPARATOR)
    file_name = segments.pop()
    base_path = f"{SEPARATOR.join(segments)}{SEPARATOR}"
    logger.debug("Split %s into base %r and file %r", frame_path, base_path, file_name)
    return base_path, file_name


def extension_token(file_name: str) -> str:
    """Return the text after the final dot (the whole name when there is none)."""

    return file_name.split(".")[-1]
