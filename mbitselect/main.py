#!/usr/bin/env python3
"""
mbitselect - detects the version of the connected micro:bit, if present, and
prints the corresponding tinygo target. Otherwise it prints the fallback
target. If multiple micro:bits are connected, the version of the first one is
used (the same board `tinygo flash` would pick).

Only the target is written to stdout, without a trailing newline, so the
output can be captured directly:

    tinygo flash -target=$(mbitselect -fallback=microbit-v2) .
"""

import argparse
import sys
from typing import Mapping, Optional, Sequence

from pydantic import ValidationError

from mbitselect import __version__
from mbitselect.providers.board import (
    DetectionIOError,
    InvalidDetailsError,
    MicrobitVersion,
    NotDetectedError,
    UnknownFirmwareError,
    resolve_connected_microbit_version,
)
from mbitselect.services.settings import Settings
from mbitselect.utils.logger import get_logger

ISSUES_URL = "https://github.com/nightmarlin/mbitselect/issues"

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mbitselect",
        description="Print the tinygo target of the connected micro:bit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mbitselect
  mbitselect -fallback=microbit-v2
  mbitselect -verbose -fallback=microbit-v2
        """,
    )
    # Single-dash long flags are kept for compatibility with existing build scripts
    parser.add_argument(
        "-fallback", "--fallback",
        default=None,
        metavar="[microbit|microbit-v2]",
        help="the micro:bit target to fall back to if one cannot be detected "
             f"(default: {MicrobitVersion.default()})",
    )
    parser.add_argument(
        "-verbose", "--verbose",
        action="store_true",
        default=None,
        help="write additional logging output to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Run the detection and return the process exit status"""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_args(fallback=args.fallback, verbose=args.verbose, environ=environ)
    except ValidationError as e:
        logger = get_logger(verbose=bool(args.verbose))
        value = args.fallback if args.fallback is not None else e.errors()[0].get("input")
        logger.error(
            f'invalid value for -fallback flag: {value!r} (note: must be one of "microbit" or "microbit-v2")'
        )
        return EXIT_FAILURE

    logger = get_logger(verbose=settings.verbose)
    target = settings.fallback

    try:
        resolved = resolve_connected_microbit_version()
    except NotDetectedError:
        logger.info(
            f"unable to detect a connected microbit, using fallback {target} "
            "(note: try un-mounting and re-mounting the device)"
        )
    except InvalidDetailsError:
        logger.error(
            "the details file could not be parsed (note: try un-mounting and re-mounting the device, "
            "and ensuring its filesystem is correctly mounted)"
        )
        return EXIT_FAILURE
    except UnknownFirmwareError as e:
        logger.error(
            f"{e} (note: please report this issue at {ISSUES_URL} "
            "with a copy of the /MICROBIT/DETAILS.TXT file)"
        )
        return EXIT_FAILURE
    except DetectionIOError as e:
        logger.error(f"failed to detect microbit version: {e}")
        return EXIT_FAILURE
    else:
        if not isinstance(resolved, MicrobitVersion):
            logger.critical(
                f"invalid microbit version returned from resolver: {resolved!r} "
                f"(note: report this issue at {ISSUES_URL})"
            )
            return EXIT_FAILURE
        logger.info(f"Detected {resolved}")
        target = resolved

    try:
        sys.stdout.write(str(target))
        sys.stdout.flush()
    except OSError as e:
        logger.error(f"failed to print resolved microbit platform: {e}")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
