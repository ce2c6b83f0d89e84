"""
Command line interface for photoprint.

Examples:
    photoprint holiday/ --size 13x18 --border polaroid -o prints
    photoprint a.jpg b.jpg --copies-for a.jpg=4 --format both --zip
    photoprint scans/ --custom-size 1000 1500 --unit px --fit contain
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from photoprint import __version__
from photoprint.builder import BuildConfig, BuildError, OutputFormat, PageConfig, build_prints
from photoprint.core.models import (
    CUSTOM_SIZE_ID,
    STANDARD_SIZES,
    BorderStyle,
    FitMode,
    Orientation,
    PrintSettings,
    SizeUnit,
    UnknownSizeError,
)

logger = logging.getLogger("photoprint")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photoprint",
        description="Lay out photos on printable pages (PDF) or export print-ready PNGs.",
    )
    parser.add_argument("inputs", nargs="*", type=Path, help="Photo files and/or directories")
    parser.add_argument("-o", "--output", type=Path, default=Path("prints"),
                        help="Base output directory (default: prints)")
    parser.add_argument("--format", dest="output_format", default=OutputFormat.PDF.value,
                        choices=[f.value for f in OutputFormat], help="Output kind (default: pdf)")
    parser.add_argument("--zip", action="store_true", help="Also bundle PNG output into images.zip")

    size = parser.add_argument_group("print size")
    size.add_argument("--size", default="10x15",
                      help="Catalog size id (see --list-sizes), default 10x15")
    size.add_argument("--custom-size", nargs=2, type=float, metavar=("W", "H"),
                      help="Custom print size, overrides --size")
    size.add_argument("--unit", default=SizeUnit.CM.value, choices=[u.value for u in SizeUnit],
                      help="Unit of --custom-size (px assume 300 DPI)")
    size.add_argument("--list-sizes", action="store_true", help="List catalog sizes and exit")

    layout = parser.add_argument_group("layout")
    layout.add_argument("--orientation", default=Orientation.AUTO.value,
                        choices=[o.value for o in Orientation])
    layout.add_argument("--margin", type=float, default=0.3, help="Page margin in cm (default 0.3)")
    layout.add_argument("--spacing", type=float, default=0.2, help="Gap between photos in cm (default 0.2)")
    layout.add_argument("--page-size", nargs=2, type=float, metavar=("W", "H"),
                        help="Page size in cm (default A4 21 x 29.7)")
    layout.add_argument("--dpi", type=int, default=300, help="Rasterization resolution (default 300)")

    style = parser.add_argument_group("style")
    style.add_argument("--border", default=BorderStyle.NONE.value,
                       choices=[b.value for b in BorderStyle])
    style.add_argument("--fit", default=FitMode.COVER.value, choices=[f.value for f in FitMode],
                       help="cover crops to fill, contain shows the whole photo")

    copies = parser.add_argument_group("copies")
    copies.add_argument("--copies", type=int, default=1, help="Copies of every photo (default 1)")
    copies.add_argument("--copies-for", action="append", default=[], metavar="NAME=N",
                        help="Copies of one photo by file name or stem (repeatable)")

    parser.add_argument("--no-metadata", action="store_true", help="Do not write build_metadata.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_copies_for(entries: List[str]) -> Dict[str, int]:
    """
    Parse NAME=N entries.

    Raises:
        ValueError: On a malformed entry
    """
    result: Dict[str, int] = {}
    for entry in entries:
        name, sep, count = entry.rpartition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=N, got {entry!r}")
        try:
            result[name] = int(count)
        except ValueError:
            raise ValueError(f"Copy count must be an integer in {entry!r}") from None
    return result


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    """Map parsed arguments to a BuildConfig (validation happens in the dataclasses)."""
    if args.custom_size:
        size_kwargs = dict(
            size_id=CUSTOM_SIZE_ID,
            custom_width=args.custom_size[0],
            custom_height=args.custom_size[1],
            custom_unit=args.unit,
        )
    else:
        size_kwargs = dict(size_id=args.size)

    settings = PrintSettings(
        orientation=args.orientation,
        margin_cm=args.margin,
        spacing_cm=args.spacing,
        border_style=args.border,
        fit_mode=args.fit,
        **size_kwargs,
    )

    if args.page_size:
        page = PageConfig(width_cm=args.page_size[0], height_cm=args.page_size[1], dpi=args.dpi)
    else:
        page = PageConfig(dpi=args.dpi)

    return BuildConfig(
        inputs=list(args.inputs),
        output_dir=args.output,
        settings=settings,
        page=page,
        output_format=args.output_format,
        copies=args.copies,
        copies_by_name=parse_copies_for(args.copies_for),
        zip_images=args.zip,
        write_metadata=not args.no_metadata,
    )


def _print_sizes() -> None:
    for size in STANDARD_SIZES:
        print(f"{size.id:>6}  {size.name:<16} {size.width_cm:g} x {size.height_cm:g} cm")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.list_sizes:
        _print_sizes()
        return 0
    if not args.inputs:
        parser.error("at least one input file or directory is required")

    try:
        config = config_from_args(args)
        result = build_prints(config)
    except (BuildError, UnknownSizeError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    for warning in result.warnings:
        logger.warning(f"Warning: {warning}")
    if result.pdf_path:
        logger.info(f"PDF: {result.pdf_path} ({result.page_count} pages)")
    if result.image_paths:
        logger.info(f"Images: {len(result.image_paths)} files in {result.image_paths[0].parent}")
    if result.zip_path:
        logger.info(f"ZIP: {result.zip_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
