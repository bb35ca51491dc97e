"""otpgate CLI: secrets, codes and the HTTP server.

Usage:
    otpgate secret [--bytes N]                      # New Base32 secret (not stored)
    otpgate code SECRET                             # Current code for a secret
    otpgate verify SECRET CODE                      # Exit 0 if accepted, 1 if not
    otpgate uri --issuer ACME --account a@b SECRET  # otpauth:// enrollment URI
    otpgate encrypt SECRET                          # enc: value for the users file
    otpgate server [--host H] [--port P]            # Start the HTTP API
"""

from __future__ import annotations

import argparse
import logging
import sys

from otpgate.config import settings
from otpgate.otp import OtpError, build_totp, generate_base32_secret

logger = logging.getLogger(__name__)


def cmd_secret(args: argparse.Namespace) -> None:
    """Print a fresh secret."""
    print(generate_base32_secret(args.bytes))


def cmd_code(args: argparse.Namespace) -> None:
    """Print the code valid right now."""
    totp = build_totp("", "", args.secret, period=settings.period, skew=settings.skew)
    print(totp.now())


def cmd_verify(args: argparse.Namespace) -> None:
    """Check a code against the current time window."""
    totp = build_totp("", "", args.secret, period=settings.period, skew=settings.skew)
    if totp.check(args.code):
        print("ok")
    else:
        print("rejected")
        sys.exit(1)


def cmd_uri(args: argparse.Namespace) -> None:
    """Print the enrollment URI."""
    issuer = args.issuer if args.issuer is not None else settings.default_issuer
    totp = build_totp(issuer, args.account, args.secret, period=settings.period, skew=settings.skew)
    print(totp.provisioning_uri())


def cmd_encrypt(args: argparse.Namespace) -> None:
    """Encrypt a secret for storage in the users file."""
    from otpgate.crypto import encrypt

    # Reject unusable secrets before they reach the file
    build_totp("", "", args.secret)
    print(encrypt(args.secret))


def cmd_server(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    import uvicorn

    from otpgate.server.app import app

    print(f"Starting otpgate on http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="otpgate",
        description="otpgate: TOTP enrollment and verification",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", help="Command to run")

    # secret
    p_secret = sub.add_parser("secret", help="Generate a Base32 secret")
    p_secret.add_argument("--bytes", type=int, default=settings.secret_bytes)

    # code
    p_code = sub.add_parser("code", help="Print the current code")
    p_code.add_argument("secret")

    # verify
    p_verify = sub.add_parser("verify", help="Verify a code")
    p_verify.add_argument("secret")
    p_verify.add_argument("code")

    # uri
    p_uri = sub.add_parser("uri", help="Build an otpauth:// URI")
    p_uri.add_argument("secret")
    p_uri.add_argument("--account", required=True)
    p_uri.add_argument("--issuer", default=None)

    # encrypt
    p_enc = sub.add_parser("encrypt", help="Encrypt a secret with OTPGATE_MASTER_KEY")
    p_enc.add_argument("secret")

    # server
    p_server = sub.add_parser("server", help="Start the HTTP API")
    p_server.add_argument("--host", default=settings.host)
    p_server.add_argument("--port", type=int, default=settings.port)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    dispatch = {
        "secret": cmd_secret,
        "code": cmd_code,
        "verify": cmd_verify,
        "uri": cmd_uri,
        "encrypt": cmd_encrypt,
        "server": cmd_server,
    }
    try:
        dispatch[args.command](args)
    except (OtpError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
