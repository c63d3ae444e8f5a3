"""Domain-specific exceptions for frame sequence parsing."""


class FrameSequenceError(ValueError):
    """Base class for configuration errors raised while parsing a frame path."""


class MissingFieldError(FrameSequenceError):
    """Raised when a required configuration field is empty or absent."""


class InvalidFrameCountError(FrameSequenceError):
    """Raised when the frame count is set but is not a positive integer."""


class UnsupportedExtensionError(FrameSequenceError):
    """Raised when the example frame has an extension outside the whitelist."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Image with extension ['{extension}'] is not supported.")


class BadSequenceFormatError(FrameSequenceError):
    """Raised when the file name has no usable numeric sequence."""

    def __init__(self, file_name: str, reason: str | None = None):
        self.file_name = file_name
        message = (
            f"Bad image sequence format in '{file_name}'. Should be "
            'at least 2 digits long, f.e. "frame_01.jpg"'
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InsufficientPaddingError(FrameSequenceError):
    """Raised when the frame count needs more digits than the example frame has."""

    def __init__(self, frame_count: int, pad_width: int):
        self.frame_count = frame_count
        self.pad_width = pad_width
        super().__init__(
            f"Leading zeros in first frame path have to cover the frame count: "
            f"{frame_count} needs {len(str(frame_count))} digits but the sequence has {pad_width}."
        )
