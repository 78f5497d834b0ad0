"""CLI entrypoint for rapleaf-lookup."""

from __future__ import annotations

import argparse
import json
import os
from collections.abc import Sequence

from .client import RapleafClient
from .config import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_API_VERSION,
    DEFAULT_REQUEST_TIMEOUT,
    ClientConfig,
)
from .errors import ConfigError, RapleafError, SelectorError
from .logging_utils import configure_logging
from .models import Selector
from .person import Person
from .resolver import selector_from_options
from .validation import SUPPORTED_VERSIONS


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Rapleaf person lookup by email, email hash, or social profile."
    )
    parser.add_argument("--email", help="Plaintext email address.")
    parser.add_argument("--md5", help="MD5 hex digest of the email address.")
    parser.add_argument("--sha1", help="SHA1 hex digest of the email address.")
    parser.add_argument("--site", help="Social site for a profile lookup (v3 only).")
    parser.add_argument("--profile", help="Profile identifier on --site (v3 only).")
    parser.add_argument("--api-key", help="Rapleaf API key (or set RAPLEAF_API_KEY env var).")
    parser.add_argument("--host", default=DEFAULT_API_HOST, help="API host.")
    parser.add_argument("--port", type=int, default=DEFAULT_API_PORT, help="API port.")
    parser.add_argument(
        "--api-version",
        default=DEFAULT_API_VERSION,
        help=f"API version ({', '.join(SUPPORTED_VERSIONS)}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Request timeout in seconds.",
    )
    parser.add_argument("--json", action="store_true", help="Print the person as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and pre-validate CLI input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not (args.email or args.md5 or args.sha1 or args.site or args.profile):
        parser.error("Provide --email, --md5, --sha1, or --site with --profile.")
    return args


def namespace_to_config(args: argparse.Namespace) -> ClientConfig:
    """Convert CLI args to a validated ClientConfig."""
    return ClientConfig(
        api_key=args.api_key or os.getenv("RAPLEAF_API_KEY", ""),
        host=args.host,
        port=args.port,
        version=args.api_version,
        timeout=args.timeout,
    )


def namespace_to_selector(args: argparse.Namespace) -> Selector:
    return selector_from_options(
        email=args.email,
        md5=args.md5,
        sha1=args.sha1,
        site=args.site,
        profile=args.profile,
    )


def format_person(person: Person, as_json: bool = False) -> str:
    """Render a person as sorted key/value lines or a JSON object."""
    if as_json:
        return json.dumps(person.attributes, indent=2, sort_keys=True)
    return "\n".join(f"{key}: {value}" for key, value in sorted(person.attributes.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    logger = configure_logging(args.verbose)
    try:
        config = namespace_to_config(args)
        selector = namespace_to_selector(args)
        client = RapleafClient(config, logger=logger)
        person = client.person(selector)
    except (ConfigError, SelectorError) as exc:
        logger.error("Invalid arguments: %s", exc)
        return 2
    except RapleafError as exc:
        logger.error("Lookup failed: %s", exc)
        return 1

    print(format_person(person, as_json=args.json))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
