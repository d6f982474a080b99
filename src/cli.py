"""Command-line interface for pinpad."""

import argparse
import logging
import sys
from dataclasses import dataclass

from app import PasscodeApp
from biometrics import detect_authenticator
from controller.validators import MAX_PASSCODE_LENGTH, validate_passcode_length, validate_reset_delay
from model import PasscodeMode
from settings import Settings, setup_logging

PINPAD_VERSION = "0.1.0"

EXIT_CANCELLED = 1

log = logging.getLogger(__name__)


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    mode: PasscodeMode
    length: int
    reset_delay: float
    cancellable: bool
    biometrics: bool


def _length_arg(value: str) -> int:
    length = validate_passcode_length(value)
    if length is None:
        raise argparse.ArgumentTypeError(
            f"invalid passcode length: {value!r} (must be 1-{MAX_PASSCODE_LENGTH})"
        )
    return length


def _delay_arg(value: str) -> float:
    delay = validate_reset_delay(value)
    if delay is None:
        raise argparse.ArgumentTypeError(f"invalid reset delay: {value!r} (must be >= 0 seconds)")
    return delay


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for pinpad CLI."""
    parser = argparse.ArgumentParser(
        prog="pinpad",
        description="Prompt for a numeric passcode in the terminal.",
        epilog=(
            "The passcode is written to stdout on success. "
            "Exit status is 1 when the prompt is cancelled."
        ),
    )
    parser.add_argument(
        "mode",
        choices=[mode.value for mode in PasscodeMode],
        help="create a new passcode, verify one, or change an existing one",
    )
    parser.add_argument("--length", type=_length_arg, metavar="N", help="number of digits (default: 4)")
    parser.add_argument(
        "--reset-delay",
        type=_delay_arg,
        metavar="SECONDS",
        help="how long a confirmation mismatch stays on screen (default: 0.6)",
    )
    parser.add_argument("--no-cancel", action="store_true", help="do not offer a way to cancel")
    parser.add_argument("--no-biometrics", action="store_true", help="never offer fingerprint unlock")
    parser.add_argument("--version", action="version", version=f"%(prog)s {PINPAD_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> ParsedArgs:
    """Parse command line arguments on top of environment settings.

    Returns:
        ParsedArgs with mode, length, delay and host options.
    """
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    settings = settings or Settings.from_env()

    return ParsedArgs(
        mode=PasscodeMode(args.mode),
        length=args.length if args.length is not None else settings.length,
        reset_delay=args.reset_delay if args.reset_delay is not None else settings.reset_delay,
        cancellable=not args.no_cancel,
        biometrics=settings.biometrics and not args.no_biometrics,
    )


def main() -> None:
    """Main entry point."""
    setup_logging()
    args = parse_args()
    log.info(f"pinpad {PINPAD_VERSION} started: mode={args.mode.value} length={args.length}")

    app = PasscodeApp(
        args.mode,
        args.length,
        cancellable=args.cancellable,
        authenticator=detect_authenticator(args.biometrics),
        reset_delay=args.reset_delay,
    )
    code = app.run()

    if code is None:
        print("Cancelled.", file=sys.stderr)
        sys.exit(EXIT_CANCELLED)
    print(code)


if __name__ == "__main__":
    main()
