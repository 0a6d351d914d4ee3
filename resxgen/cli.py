# SPDX-License-Identifier: MIT
"""Command-line interface for resxgen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from resxgen.batch import embed_resx_source
from resxgen.configure.manifest import DEFAULT_OUTPUT_DIR, get_default, load_manifest
from resxgen.core.errors import ResxGenError
from resxgen.core.item import (
    GENERATE_LEGACY_CODE,
    GENERATE_LITERALS,
    GENERATE_SOURCE,
    GENERATED_MODULE_NAME,
    ResourceItem,
)
from resxgen.core.resource import load_entries

# Set up logging
logger = logging.getLogger("resxgen")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def items_from_args(args: argparse.Namespace) -> list[ResourceItem]:
    """Turn resource files given on the command line into items.

    Every file gets GenerateSource=true and the mode flags from the
    command line.
    """
    metadata = {
        GENERATE_SOURCE: "true",
        GENERATE_LEGACY_CODE: "true" if args.legacy else "false",
        GENERATE_LITERALS: "false" if args.no_literals else "true",
    }
    if args.module_name:
        metadata[GENERATED_MODULE_NAME] = args.module_name
    return [ResourceItem(Path(resx), dict(metadata)) for resx in args.resources]


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate source for resource files.

    Resources come either from the command line or from a manifest.
    Command-line options override the manifest's settings.
    """
    setup_logging(args.verbose, args.debug)

    if args.manifest:
        try:
            manifest = load_manifest(args.manifest)
        except (FileNotFoundError, ResxGenError) as e:
            logger.error("%s", e)
            return 1
        items = manifest.items + items_from_args(args)
        output_dir = Path(args.output_dir) if args.output_dir else manifest.output_dir
        target_framework = args.target_framework or manifest.target_framework
    else:
        if not args.resources:
            logger.error("No resource files given")
            logger.info("Pass .resx files or use --manifest")
            return 1
        items = items_from_args(args)
        output_dir = Path(args.output_dir or get_default("OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
        target_framework = args.target_framework or get_default("TARGET_FRAMEWORK") or ""

    if len(args.resources) > 1 and args.module_name:
        logger.warning("--module-name applies to every resource file given")

    try:
        result = embed_resx_source(items, output_dir, target_framework)
    except ResxGenError as e:
        logger.error("%s", e)
        return 1

    for source in result.generated_sources:
        print(source)

    return 0 if result.success else 1


def cmd_info(args: argparse.Namespace) -> int:
    """Show the entries of a resource file."""
    setup_logging(args.verbose, args.debug)

    try:
        entries = load_entries(args.resource)
    except ResxGenError as e:
        logger.error("%s", e)
        return 1

    print(f"Resource file: {args.resource}")
    print(f"Entries: {len(entries)}")
    print()
    for entry in entries:
        kind = "string" if entry.is_string else "typed"
        first_line = entry.value.splitlines()[0] if entry.value else ""
        print(f"  {entry.identifier:<30} {kind:<7} {first_line}")

    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the resxgen CLI."""
    parser = argparse.ArgumentParser(
        prog="resxgen",
        description="Generate F# resource accessors from .resx files.",
        epilog="Run 'resxgen <command> --help' for command-specific help.",
    )
    from resxgen import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # resxgen generate
    gen_parser = subparsers.add_parser(
        "generate", help="Generate source files from .resx files"
    )
    add_common_args(gen_parser)
    gen_parser.add_argument("resources", nargs="*", help="Resource files (.resx)")
    gen_parser.add_argument(
        "-o",
        "--output-dir",
        help=f"Output directory (default: $RESXGEN_OUTPUT_DIR or {DEFAULT_OUTPUT_DIR})",
    )
    gen_parser.add_argument(
        "-f",
        "--target-framework",
        metavar="TFM",
        help="Target framework, e.g. netstandard2.0 (default: $RESXGEN_TARGET_FRAMEWORK)",
    )
    gen_parser.add_argument(
        "-m", "--module-name", help="Generated module name (default: file base name)"
    )
    gen_parser.add_argument(
        "--legacy",
        action="store_true",
        help="Bind resource names directly instead of looking values up",
    )
    gen_parser.add_argument(
        "--no-literals",
        action="store_true",
        help="In legacy mode, don't mark bindings as [<Literal>]",
    )
    gen_parser.add_argument("--manifest", help="JSON manifest describing the batch")
    gen_parser.set_defaults(func=cmd_generate)

    # resxgen info
    info_parser = subparsers.add_parser("info", help="Show the entries of a .resx file")
    add_common_args(info_parser)
    info_parser.add_argument("resource", help="Resource file (.resx)")
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Run the specified command
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
