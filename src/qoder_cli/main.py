import argparse, sys

from qoder_cli.greeting import EncodingError, build_greeting, serialize

import logging
from qoder_cli.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run_greet(args: argparse.Namespace) -> int:
    """Handle ``greet <input>``: print the greeting as one line of JSON."""
    logger.info(f"Greeting input of {len(args.input)} characters")
    try:
        # fully serialized in memory before anything is written
        payload = serialize(build_greeting(args.input))
    except EncodingError as err:
        logger.debug("Serialization failed", exc_info=True)
        print(f"Error marshaling JSON: {err}", file=sys.stderr)
        return 1

    out = getattr(sys.stdout, "buffer", None)   # None for StringIO and similar
    if out is not None:
        out.write(payload + b"\n")
        out.flush()
    else:
        sys.stdout.write(payload.decode("utf-8") + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qoder-cli",
        description="A CLI tool that processes user input and generates greetings for GitHub Actions",
    )

    parser.add_argument("--log",
        action="store_const",          # flag present? drop const into dest
        const=True,
        dest="log_to_file",
        default=False,
        help="also write logs to a file"
    )

    # ―― verbose flag ――
    parser.add_argument(
        "-v", "--verbose",
        action="store_const",
        const=logging.DEBUG,           # numeric DEBUG level
        dest="log_level",
        default=None,                  # logging disabled when omitted
        help="Enable verbose output on stderr (sets logging level to DEBUG)"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{greet}")
    greet = subparsers.add_parser(
        "greet",
        help="Echo user input and generate a friendly greeting",
        description="Echo user input and generate a friendly greeting",
    )
    greet.add_argument("input", help="Text to greet; any value, including an empty string")
    greet.set_defaults(handler=run_greet)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)   # usage errors exit here with status 2

    if not args.log_level:
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        log_path = setup_logging(args.log_to_file, args.log_level)
        if log_path:
            logger.info(f"Logging to {log_path}")

    if args.command is None:
        parser.print_help()
        return 0

    return args.handler(args)


def cli():
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
