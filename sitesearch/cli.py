#!/usr/bin/env python3
"""
Site search index build - export section documents for the search index.

Usage:
    sitesearch-build                         # Uses sitesearch/config.yaml
    sitesearch-build --output docs.jsonl     # Custom output path
    sitesearch-build --workers 8             # Process pages in parallel
    sitesearch-build --include-api-data      # Also index API reference data
    sitesearch-build --config custom.yaml    # Use custom config file

Configuration:
    Config file: --config, else $SITESEARCH_CONFIG, else sitesearch/config.yaml
    Environment variables are used when no config file exists
    Set SITESEARCH_FEED_URL to the site's next-data base URL
"""

import argparse
import dataclasses
import logging
import sys

from sitesearch.errors import FetchError
from sitesearch.pipeline.config import DEFAULT_CONFIG_PATH, Config, resolve_config_path
from sitesearch.pipeline.pipeline import run_pipeline


def load_config(path: str | None = None) -> Config:
    """Load the build config, reporting where it came from."""
    config_path = resolve_config_path(path)
    if config_path.is_file():
        print(f"Config: {config_path}")
    else:
        print(f"Config: environment (no file at {config_path})")
    return Config.load(path)


def stage(title: str) -> None:
    print(f"\n== {title} ".ljust(52, "="))


def print_stats(stats: dict) -> None:
    print(f"✓ Pages: {stats['indexed']}/{stats['pages']} split")
    print(f"  Skipped: {stats['skipped']}")
    print(f"  Documents written: {stats['written']} -> {stats['output']}")

    if stats["errors"]:
        print(f"  Errors: {len(stats['errors'])}")
        for err in stats["errors"][:5]:
            print(f"    - {err['pathname']}: {err['error']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Site search - build section documents for the search index"
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Build config YAML (default: $SITESEARCH_CONFIG or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output JSONL path (overrides config)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of pages processed in parallel (overrides config)",
    )
    parser.add_argument(
        "--include-api-data",
        action="store_true",
        help="Index API reference data alongside page data",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    stage("Site Search Index Build")

    config = load_config(args.config)

    # Override config with command-line arguments
    pipeline_config = config.pipeline
    if args.workers is not None:
        pipeline_config = dataclasses.replace(pipeline_config, workers=max(args.workers, 1))
    if args.include_api_data:
        pipeline_config = dataclasses.replace(pipeline_config, include_api_data=True)
    config = dataclasses.replace(config, pipeline=pipeline_config)

    if not config.feed.base_url:
        print("✗ Error: feed base URL not set in config or environment")
        print("  Set feed.base_url in config.yaml or SITESEARCH_FEED_URL env var")
        sys.exit(1)

    try:
        stats = run_pipeline(config=config, output_jsonl=args.output or "")
    except FetchError as e:
        print(f"\n✗ Error: {e}")
        sys.exit(1)

    stage("Pipeline Statistics")
    print_stats(stats)
    stage("✓ Build Complete")

    return stats


if __name__ == "__main__":
    main()
