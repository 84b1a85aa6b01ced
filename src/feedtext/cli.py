#!/usr/bin/env python3
"""CLI entry point for feedtext package.

Usage:
    python -m feedtext decode <text>
    python -m feedtext strip-cdata <text>
    python -m feedtext name <text>
    python -m feedtext extract <feed.xml> [--config feedtext.toml] [--json]
    python -m feedtext init-config [--output feedtext.toml]
"""

import argparse
import json
import logging
import sys

DEFAULT_CONFIG = "feedtext.toml"


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="feedtext",
        description="Decode XML text content from RSS and Atom feeds.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log lenient fallbacks and decode errors")
    sub = parser.add_subparsers(dest="command")

    # --- decode ---
    decode_parser = sub.add_parser("decode", help="Decode entity references in a string")
    decode_parser.add_argument("text", help="Text containing &name; / &#N; / &#xH; references")

    # --- strip-cdata ---
    cdata_parser = sub.add_parser("strip-cdata", help="Strip CDATA sections and decode the rest")
    cdata_parser.add_argument("text", help="Text possibly containing <![CDATA[...]]> sections")

    # --- name ---
    name_parser = sub.add_parser("name", help="Split a 'Name (address)' string")
    name_parser.add_argument("text", help="Author string, e.g. 'john@example.com (John Doe)'")

    # --- extract ---
    extract_parser = sub.add_parser("extract", help="Extract decoded text fields and people from a feed")
    extract_parser.add_argument("feed", help="Path to an RSS or Atom document")
    extract_parser.add_argument("--config", default="", help="Path to feedtext.toml config file")
    extract_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    # --- init-config ---
    config_parser = sub.add_parser("init-config", help="Generate a default feedtext.toml")
    config_parser.add_argument("--output", default=DEFAULT_CONFIG, help="Config file output path")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "decode":
        _handle_decode(args)
    elif args.command == "strip-cdata":
        _handle_strip_cdata(args)
    elif args.command == "name":
        _handle_name(args)
    elif args.command == "extract":
        _handle_extract(args)
    elif args.command == "init-config":
        _handle_init_config(args)


def _handle_decode(args):
    from feedtext.core.entities import decode_entities
    from feedtext.errors import EntityError

    try:
        print(decode_entities(args.text))
    except EntityError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _handle_strip_cdata(args):
    from feedtext.core.cdata import strip_cdata

    print(strip_cdata(args.text))


def _handle_name(args):
    from feedtext.core.names import parse_name_address

    name, address = parse_name_address(args.text)
    print(f"name={name}")
    print(f"address={address}")


def _handle_extract(args):
    from lxml import etree

    from feedtext.config import ExtractConfig, load_config
    from feedtext.extract import extract_feed

    config = load_config(args.config) if args.config else ExtractConfig()

    try:
        result = extract_feed(args.feed, config)
    except (OSError, etree.XMLSyntaxError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    for field in result.fields:
        if field.error:
            print(f"{field.path}: [error: {field.error}]")
        else:
            print(f"{field.path}: {field.text}")
    for person in result.people:
        parts = [p for p in (person.name, f"<{person.address}>" if person.address else "") if p]
        print(f"{person.path}: {' '.join(parts)}")

    if result.errors:
        print(f"\n({len(result.errors)} fields could not be decoded)", file=sys.stderr)


def _handle_init_config(args):
    from feedtext.config import save_config

    path = save_config(args.output)
    print(f"Config generated at {path}")


if __name__ == "__main__":
    main()
