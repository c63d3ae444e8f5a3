"""Infer a frame naming pattern from the path of the first frame.

The numeric sequence is always the *last* run of digits in the file name, and
it must be at least two digits wide. Names such as ``v2_frame_010.png`` resolve
to ``010``; no attempt is made to guess between equally plausible runs.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from . import FrameSequenceDescriptor, FrameSequenceOptions
from .errors import BadSequenceFormatError, InsufficientPaddingError
from ..utils import path_tools, validators

logger = logging.getLogger(__name__)

# A digit run with no further digit anywhere after it.
LAST_DIGIT_RUN = re.compile(r"\d+(?!.*\d)", re.ASCII)


def _find_sequence(file_name: str) -> re.Match[str]:
    match = LAST_DIGIT_RUN.search(file_name)
    if match is None:
        raise BadSequenceFormatError(file_name, reason="no digits found")
    if len(match.group()) < validators.MIN_SEQUENCE_DIGITS:
        raise BadSequenceFormatError(file_name, reason=f"sequence '{match.group()}' is a single digit")
    return match


def parse(frame_path: str, frame_count: int) -> FrameSequenceDescriptor:
    """Build a descriptor for ``frame_count`` frames named like ``frame_path``.

    Raises a ``FrameSequenceError`` subclass when the path or count cannot
    describe a sequence; no partially built descriptor is ever returned.
    """

    frame_path = validators.require_frame_path(frame_path)
    frame_count = validators.require_frame_count(frame_count)

    base_path, file_name = path_tools.split_base_path(frame_path)
    extension = validators.validate_extension(path_tools.extension_token(file_name))
    match = _find_sequence(file_name)
    digits = match.group()

    pad_width = len(digits)
    if validators.decimal_length(frame_count) > pad_width:
        raise InsufficientPaddingError(frame_count, pad_width)

    descriptor = FrameSequenceDescriptor(
        base_path=base_path,
        prefix=file_name[: match.start()],
        sequence_start=int(digits),
        pad_width=pad_width,
        suffix=file_name[match.end() :],
        extension=extension,
        frame_count=frame_count,
    )
    logger.debug(
        "Parsed %s: prefix=%r start=%d width=%d suffix=%r (%d frames)",
        frame_path,
        descriptor.prefix,
        descriptor.sequence_start,
        descriptor.pad_width,
        descriptor.suffix,
        frame_count,
    )
    return descriptor


def parse_options(options: FrameSequenceOptions) -> FrameSequenceDescriptor:
    return parse(options.frame_path, options.frame_count)


def parse_mapping(payload: Mapping[str, Any]) -> FrameSequenceDescriptor:
    """Parse a configuration mapping using either camelCase or snake_case keys."""

    frame_path = payload.get("framePath", payload.get("frame_path"))
    frame_count = payload.get("frameCount", payload.get("frame_count"))
    return parse(frame_path, frame_count)
