"""Main module for the photo normalizer CLI."""

import sys
import json
import argparse
from typing import List, Optional

from . import __version__
from .core import PhotoNormalizerError
from .handler import build_s3_event, lambda_handler


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="photo-normalizer",
        description="Photo Normalizer - resize staged S3 images for serving",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize one staged image (buckets come from the environment)
  DUMP_BUCKET_NAME=dump OPTIMIZED_BUCKET_NAME=optimized \\
      photo-normalizer process --key atlas1/marker2/photo3.jpg

  # Show version
  photo-normalizer version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    process_parser: argparse.ArgumentParser = subparsers.add_parser(
        "process", help="Normalize a staged image as if S3 had notified us"
    )
    process_parser.add_argument(
        "--key",
        required=True,
        help="Staging key in the form <collection>/<group>/<item.ext>",
    )

    subparsers.add_parser("version", help="Show version information")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the command-line interface (CLI) of the Photo Normalizer.

    The "process" command wraps the key in an S3 notification event and runs
    it through the same handler the trigger invokes, printing the response.
    """
    parser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.command == "process":
        try:
            response = lambda_handler(build_s3_event(args.key))
        except PhotoNormalizerError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(response))

    elif args.command == "version":
        print("Photo Normalizer CLI")
        print(f"Version {__version__}")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
