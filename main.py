import argparse
import sys
from typing import Optional, Sequence, Tuple

from socketlabs import Attachment, Message, Request, SocketLabsError
from socketlabs.core.config import ConfigurationError, get_config
from socketlabs.core.logger import get_logger

logger = get_logger("main")


def parse_header(value: str) -> Tuple[str, str]:
    name, sep, header_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Header must look like NAME=VALUE, got: {value}")
    return name.strip(), header_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send an email through the SocketLabs Injection API"
    )
    parser.add_argument("--from", dest="from_address", required=True, help="Sender address")
    parser.add_argument("--from-name", help="Sender display name")
    parser.add_argument(
        "--to", action="append", required=True, help="Recipient address (repeatable)"
    )
    parser.add_argument("--cc", action="append", default=[], help="Cc address (repeatable)")
    parser.add_argument("--bcc", action="append", default=[], help="Bcc address (repeatable)")
    parser.add_argument("--reply-to", help="Reply-To address")
    parser.add_argument("--subject", default="", help="Message subject")
    parser.add_argument("--text", default="", help="Plain text body")
    parser.add_argument("--html", help="HTML body")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        type=parse_header,
        help="Custom header as NAME=VALUE (repeatable)",
    )
    parser.add_argument(
        "--attach", action="append", default=[], help="File to attach (repeatable)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the JSON payload instead of sending it",
    )
    return parser


def build_message(args: argparse.Namespace) -> Message:
    message = Message.create(args.from_address, args.from_name)
    for address in args.to:
        message.add_to(address)
    for address in args.cc:
        message.add_cc(address)
    for address in args.bcc:
        message.add_bcc(address)
    if args.reply_to:
        message.set_reply_to(args.reply_to)

    message.set_subject(args.subject)
    message.set_text(args.text)
    if args.html:
        message.set_html(args.html)
    if args.header:
        message.add_headers(args.header)
    for path in args.attach:
        message.add_attachment(Attachment.from_path(path))
    return message


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_config()
        settings.configure_logging()
        message = build_message(args)
        request = Request.from_settings([message], settings)
    except (ConfigurationError, SocketLabsError, OSError) as e:
        logger.error(f"Could not build request: {e}")
        return 1

    if args.dry_run:
        print(request.to_json())
        return 0

    try:
        response = request.send()
    except SocketLabsError as e:
        logger.error(f"Sending failed: {e}")
        return 1

    print(response.model_dump_json(indent=2))
    if not response.is_success:
        logger.error(f"SocketLabs returned {response.error_code.value}: {response.error_code}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
