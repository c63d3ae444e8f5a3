"""Core data model for frame sequence naming."""

__all__ = [
    "FrameSequenceOptions",
    "FrameSequenceDescriptor",
]

from dataclasses import asdict, dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class FrameSequenceOptions:
    """User-supplied configuration: an example first frame and the frame total."""

    frame_path: str
    frame_count: int


@dataclass(frozen=True)
class FrameSequenceDescriptor:
    """Naming pattern inferred from the first frame of a sequence.

    ``suffix`` still carries the extension text, so a frame name is rebuilt as
    ``prefix + zero padded number + suffix`` without re-appending ``extension``.
    """

    base_path: str
    prefix: str
    sequence_start: int
    pad_width: int
    suffix: str
    extension: str
    frame_count: int

    @property
    def file_name(self) -> str:
        """File name of the example frame, rebuilt from the pattern."""

        return self._format(self.sequence_start)

    def frame_name(self, index: int) -> str:
        """Return the file name of the frame at zero-based ``index``."""

        if not 0 <= index < self.frame_count:
            raise IndexError(f"Frame index {index} out of range for {self.frame_count} frames")
        return self._format(self.sequence_start + index)

    def frame_path(self, index: int) -> str:
        return f"{self.base_path}{self.frame_name(index)}"

    def frame_paths(self) -> Iterator[str]:
        for index in range(self.frame_count):
            yield self.frame_path(index)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def _format(self, number: int) -> str:
        return f"{self.prefix}{str(number).zfill(self.pad_width)}{self.suffix}"
