#!/usr/bin/env python3
"""
mdfixtures: Markdown fixture documents for exercising renderers

Common usage:
  mdfixtures --list
  mdfixtures feature-showcase
  mdfixtures long-document --sections 200 -o big.md
  mdfixtures streaming-response --stream --speed 4

Use `mdfixtures --features` to see which rendering features each fixture covers.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file

from mdfixtures.config import ConfigError, apply_config, find_config_file, load_config
from mdfixtures.long_document import DEFAULT_SECTIONS
from mdfixtures.registry import (
    FIXTURES,
    LONG_DOCUMENT_NAME,
    Fixture,
    get_fixture,
    long_document_fixture,
    uncovered_features,
)
from mdfixtures.streaming import DEFAULT_SPEED, stream_chunks


@dataclass
class Options:
    """Command-line options for the mdfixtures tool."""

    fixture: str | None
    output: str
    sections: int
    speed: float
    stream: bool
    list_fixtures: bool
    features: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which settings the user explicitly passed (for config merge precedence).
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "fixture",
        nargs="?",
        type=str,
        default=None,
        help=f"Fixture to print (one of: {', '.join([*FIXTURES, LONG_DOCUMENT_NAME])})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "-n",
        "--sections",
        type=int,
        default=DEFAULT_SECTIONS,
        help="Number of sections for long-document (default: %(default)s)",
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="Replay the fixture character by character, as a streaming model would",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=DEFAULT_SPEED,
        help="Replay speed multiplier for --stream (default: %(default)s)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_fixtures",
        help="List available fixtures and exit",
    )
    parser.add_argument(
        "--features",
        action="store_true",
        help="Show the rendering features each fixture covers and exit",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which settings were actually supplied.
    _SENTINEL = object()
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("-n", "--sections", type=int, default=_SENTINEL)
    sentinel_parser.add_argument("--speed", type=float, default=_SENTINEL)
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    if opts.fixture is not None:
        explicit_flags.add("fixture")
    for name in ("sections", "speed"):
        if getattr(sentinel_opts, name, _SENTINEL) is not _SENTINEL:
            explicit_flags.add(name)

    return (
        Options(
            fixture=opts.fixture,
            output=opts.output,
            sections=opts.sections,
            speed=opts.speed,
            stream=opts.stream,
            list_fixtures=opts.list_fixtures,
            features=opts.features,
            version=opts.version,
        ),
        explicit_flags,
    )


def _resolve_fixture(name: str, sections: int) -> Fixture:
    """Look up the requested fixture, generating the long document if asked."""
    if name == LONG_DOCUMENT_NAME:
        return long_document_fixture(sections)
    return get_fixture(name)


def _print_fixture_list() -> None:
    for fixture in [*FIXTURES.values(), long_document_fixture()]:
        print(f"{fixture.name:<20} {fixture.title}: {fixture.description}")


def _print_feature_coverage() -> None:
    for fixture in [*FIXTURES.values(), long_document_fixture()]:
        tags = ", ".join(sorted(feature.value for feature in fixture.features))
        print(f"{fixture.name}: {tags}")
    missing = uncovered_features()
    if missing:
        print("Uncovered: " + ", ".join(sorted(feature.value for feature in missing)))


def _write_output(content: str, output: str) -> None:
    if output == "-":
        sys.stdout.write(content)
        return
    # The target is only replaced once the whole document is written.
    with atomic_output_file(Path(output), make_parents=True) as temp_path:
        Path(temp_path).write_text(content, encoding="utf-8")


def _replay(content: str, speed: float) -> None:
    for chunk in stream_chunks(content, speed=speed):
        sys.stdout.write(chunk.text)
        sys.stdout.flush()
        time.sleep(chunk.delay_ms / 1000)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the mdfixtures CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("mdfixtures")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.list_fixtures:
        _print_fixture_list()
        return 0

    if options.features:
        _print_feature_coverage()
        return 0

    # Load and merge config file settings
    config_path = find_config_file(Path.cwd())
    if config_path:
        try:
            config = load_config(config_path)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        apply_config(options, config, explicit_flags)

    if not options.fixture:
        print(
            "Error: No fixture specified. Use --list to see available fixtures.",
            file=sys.stderr,
        )
        return 1

    if options.stream and options.output != "-":
        print("Error: --stream writes to stdout and cannot be used with --output", file=sys.stderr)
        return 1

    try:
        fixture = _resolve_fixture(options.fixture, options.sections)
        if options.stream:
            _replay(fixture.content, options.speed)
        else:
            _write_output(fixture.content, options.output)
    except (ValueError, TypeError) as e:
        # Bad fixture names, section counts, or speeds.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Catch other potential file errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
