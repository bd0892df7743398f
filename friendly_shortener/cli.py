"""
Command line for the Friendly URL Shortener.

    python -m friendly_shortener --backend file --path links.json shorten https://example.com/page
    python -m friendly_shortener --backend file --path links.json list
    python -m friendly_shortener --backend file --path links.json open aZ3kQ9
    python -m friendly_shortener --backend file --path links.json delete aZ3kQ9

Exit status is 0 on success and 1 for user errors (invalid URL, duplicate
slug, unknown slug), which are printed to stderr.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from friendly_shortener.analytics.analytics import LinkAnalytics
from friendly_shortener.config import settings
from friendly_shortener.errors import ShortenerError
from friendly_shortener.models import CreationResult
from friendly_shortener.navigation.navigator import RecordingNavigator, follow_redirect
from friendly_shortener.registry.link_registry import LinkRegistry
from friendly_shortener.registry.resolver import RedirectResolver
from friendly_shortener.storage.storage_factory import get_store

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="friendly_shortener", description="Friendly URL Shortener")
    ap.add_argument("--backend", default=None, help="memory, file or postgres (default: env)")
    ap.add_argument("--path", default=None, help="JSON file for the file backend")
    ap.add_argument("--dsn", default=None, help="DSN for the postgres backend")
    ap.add_argument(
        "--base-url", default=settings.BASE_URL or DEFAULT_BASE_URL, help="origin used in short URLs"
    )

    sub = ap.add_subparsers(dest="command", required=True)

    shorten = sub.add_parser("shorten", help="create a short link")
    shorten.add_argument("url")
    shorten.add_argument("--slug", default=None, help="custom slug (optional)")

    sub.add_parser("list", help="print the analytics dashboard")

    open_ = sub.add_parser("open", help="resolve a slug and record a click")
    open_.add_argument("slug")

    delete = sub.add_parser("delete", help="delete a short link")
    delete.add_argument("slug")
    return ap


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None, registry: Optional[LinkRegistry] = None) -> int:
    args = build_parser().parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    if registry is None:
        store = get_store(args.backend, path=args.path, dsn=args.dsn, ensure_schema=True)
        registry = LinkRegistry(store=store)

    if args.command == "shorten":
        try:
            record = registry.create(args.url, args.slug)
        except ShortenerError as err:
            print(err.user_message, file=sys.stderr)
            return 1
        _print_json(CreationResult.from_record(record, args.base_url).to_json_dict())
        return 0

    if args.command == "list":
        _print_json(LinkAnalytics(registry, args.base_url).rows())
        return 0

    if args.command == "open":
        navigator = RecordingNavigator()
        target = follow_redirect(RedirectResolver(registry), navigator, args.slug)
        kind, _ = navigator.current
        if kind == "navigate":
            print(target)
            return 0
        print(target, file=sys.stderr)
        return 1

    if args.command == "delete":
        if registry.delete(args.slug):
            print("Link deleted")
            return 0
        print("Link not found", file=sys.stderr)
        return 1

    return 2  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
