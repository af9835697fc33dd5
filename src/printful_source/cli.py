"""
Printful source CLI - run an ingestion outside of a host.

Usage:
    printful-source fetch --config config/printful.yaml
    printful-source fetch --api-key KEY --types Country TaxRate
    printful-source fetch --download-files --output data/printful
    printful-source list-types
    printful-source -v fetch ...        # DEBUG logs, one line per API request
    printful-source --log-dir logs fetch # also log JSON lines to logs/printful_source.log
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from printful_source.observability.logging_config import setup_logging
from printful_source.orchestration.runner import fetch_content
from printful_source.schemas.config import ResourceKind, SourceConfig
from printful_source.storage.local import summarize_directory
from printful_source.storage.node_store import NodeStore

DEFAULT_CONFIG_PATH = Path("config") / "printful.yaml"


def load_config(path: Optional[Path] = None) -> SourceConfig:
    """
    Load options from YAML.

    The file may hold the options at top level or under a ``printful:`` key.
    A missing default config file yields the defaults.
    """
    path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not path.exists():
        if path == DEFAULT_CONFIG_PATH:
            return SourceConfig()
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return SourceConfig.model_validate(data.get("printful", data))


def apply_overrides(config: SourceConfig, args) -> SourceConfig:
    overrides = {}
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.types:
        overrides["object_types"] = args.types
    if args.download_files:
        overrides["download_files"] = True
    if not overrides:
        return config
    return SourceConfig.model_validate({**config.model_dump(), **overrides})


# ── Commands ────────────────────────────────────────────────

def cmd_fetch(args) -> int:
    try:
        config = apply_overrides(load_config(args.config), args)
    except (FileNotFoundError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    store = NodeStore()
    try:
        counts = asyncio.run(fetch_content(config, store))
    except Exception:
        logger.exception("Printful fetch failed")
        # Whatever succeeded before the failure is still written out
        store.dump(args.output)
        return 1

    store.dump(args.output)
    for name, count in counts.items():
        logger.info(f"  {name:35s} {count} nodes")
    if config.download_files:
        image_dir = Path.cwd() / config.image_directory
        files, size = summarize_directory(image_dir)
        logger.info(f"Images in {image_dir}: {files} files, {size / 1024:.1f} KB")
    return 0


def cmd_list_types(args) -> int:
    config = load_config(args.config)
    for kind in ResourceKind:
        enabled = "on " if kind.value in config.object_types else "off"
        print(f"  [{enabled}] {kind.value:20s} -> {config.collection_name(kind)}")
    return 0


# ── Argument parser ─────────────────────────────────────────

def build_parser():
    parser = argparse.ArgumentParser(
        prog="printful-source",
        description="Ingest Printful catalog data into local collections",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--config", type=Path, help="YAML options file")
    parser.add_argument("--log-dir", type=Path,
                        help="Also write a rotating JSON log to this directory")
    sub = parser.add_subparsers(dest="command")

    # fetch
    p_fetch = sub.add_parser("fetch", help="Fetch configured resource kinds")
    p_fetch.add_argument("--api-key", type=str, help="Printful API key (overrides config)")
    p_fetch.add_argument("--types", nargs="+", metavar="TYPE",
                         help="Object types to fetch (e.g. SyncProduct Country)")
    p_fetch.add_argument("--download-files", action="store_true",
                         help="Download product images to the image directory")
    p_fetch.add_argument("--output", type=Path, default=Path("data") / "printful",
                         help="Directory for the collection JSON files")

    # list-types
    sub.add_parser("list-types", help="List resource kinds and collection names")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    log = setup_logging(verbose=args.verbose, log_dir=args.log_dir)
    log.info(f"Running {args.command}")

    commands = {
        "fetch": cmd_fetch,
        "list-types": cmd_list_types,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
