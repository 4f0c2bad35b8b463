"""Main CLI entry point for jmail."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from jmail.config.config_loader import ConfigError, ConfigLoader
from jmail.config.decoder_config import AppConfig
from jmail.services.decoding.base import AddressParseError, DecodeError
from jmail.services.mail_message import MailMessage, read_message

logger = logging.getLogger("jmail.cli")

COMMANDS = ("subject", "body", "show")


def configure_logging(config: AppConfig, verbose: bool = False) -> None:
    """Configure the root logger from the logging section of the config."""
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format=config.logging.format, stream=sys.stderr)


def load_message(path: str, config: AppConfig) -> MailMessage:
    """Read a message from a file path, or from stdin for ``-``."""
    if path == "-":
        return read_message(sys.stdin.buffer, config.decoding)
    return MailMessage.from_file(Path(path), config.decoding)


def _format_addresses(message: MailMessage, header: str) -> str:
    getter = message.get_from if header == "From" else message.get_to
    try:
        return ", ".join(str(address) for address in getter())
    except AddressParseError as e:
        logger.debug("%s: %s", header, e)
        return message.get_header(header)


def _body_text(message: MailMessage, config: AppConfig) -> str:
    body = message.decode_body()
    return body.decode(config.decoding.output_encoding, errors="replace")


def cmd_subject(message: MailMessage, config: AppConfig) -> None:
    """Print the decoded subject."""
    print(message.decode_subject())


def cmd_body(message: MailMessage, config: AppConfig) -> None:
    """Print the decoded body."""
    print(_body_text(message, config))


def cmd_show(message: MailMessage, config: AppConfig) -> None:
    """Print addresses, subject and body."""
    print(f"From: {_format_addresses(message, 'From')}")
    print(f"To: {_format_addresses(message, 'To')}")
    print(f"Subject: {message.decode_subject()}")
    print()
    print(_body_text(message, config))


HANDLERS = {
    "subject": cmd_subject,
    "body": cmd_body,
    "show": cmd_show,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="jmail - decode Japanese-encoded mail")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command, help_text in (
        ("subject", "Print decoded Subject headers"),
        ("body", "Print decoded message bodies"),
        ("show", "Print From, To, Subject and body"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("emails", nargs="+", help="Email file(s) to decode, '-' for stdin")
        sub.add_argument("--config", type=Path, help="Custom config file path")
        sub.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser


def run(command: str, emails: List[str], config_path: Optional[Path] = None, verbose: bool = False) -> int:
    """
    Decode each email with the given command.

    Returns:
        Process exit code: 0 on success, 1 if any email failed
    """
    try:
        config = ConfigLoader(config_path).load_app_config()
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(config, verbose)
    handler = HANDLERS[command]

    exit_code = 0
    for index, path in enumerate(emails):
        if len(emails) > 1:
            if index:
                print()
            print(f"==> {path} <==")
        try:
            handler(load_message(path, config), config)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = 1
        except DecodeError as e:
            print(f"Error: {path}: {type(e).__name__}: {e}", file=sys.stderr)
            exit_code = 1

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 1

    # Default command: show
    if argv[0] not in COMMANDS and argv[0] not in ("-h", "--help"):
        argv = ["show"] + argv

    args = parser.parse_args(argv)
    return run(args.command, args.emails, args.config, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
