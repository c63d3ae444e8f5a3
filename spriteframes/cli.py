"""Command-line entry point for inspecting frame sequence patterns."""

import argparse
import json
import logging
import sys

from .core import FrameSequenceDescriptor
from .core import sequence_parser
from .core.errors import FrameSequenceError

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spriteframes",
        description="Infer a numbered frame naming pattern from the first frame of a sprite animation.",
    )
    parser.add_argument("frame_path", help="Path to the first frame, e.g. assets/frame_001.png")
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        required=True,
        help="Total number of frames in the sequence",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print the inferred pattern as JSON",
    )
    output.add_argument(
        "--list",
        action="store_true",
        help="Print every frame path, one per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_summary(descriptor: FrameSequenceDescriptor) -> str:
    last = descriptor.frame_name(descriptor.frame_count - 1)
    lines = [
        f"base path:  {descriptor.base_path}",
        f"prefix:     {descriptor.prefix!r}",
        f"sequence:   {descriptor.sequence_start} (width {descriptor.pad_width})",
        f"suffix:     {descriptor.suffix!r}",
        f"extension:  {descriptor.extension}",
        f"frames:     {descriptor.frame_count} ({descriptor.file_name} .. {last})",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        descriptor = sequence_parser.parse(args.frame_path, args.count)
    except FrameSequenceError as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        print(json.dumps(descriptor.to_dict(), indent=2))
    elif args.list:
        for path in descriptor.frame_paths():
            print(path)
    else:
        print(format_summary(descriptor))
    return 0


if __name__ == "__main__":
    sys.exit(main())
