"""Command-line interface: write demo frames in the ``$v`` protocol."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from ahc_vdsl import samples
from ahc_vdsl.config import VisConfig, load_config
from ahc_vdsl.logging_setup import attach_console, init_logging
from ahc_vdsl.root import VisRoot

logger = logging.getLogger(__name__)

SAMPLE_CHOICES = ("snake", "shapes", "all")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ahc-vdsl", description="Emit sample visualization frames"
    )
    parser.add_argument(
        "--sample",
        choices=SAMPLE_CHOICES,
        default="all",
        help="Which demo to emit",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write frames to this file instead of stderr",
    )
    parser.add_argument(
        "--mode",
        default=None,
        help="Mode name for the emitted frames",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=5,
        help="Grid size of the snake demo",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the summary table",
    )
    return parser


def build_root(args: argparse.Namespace, cfg: VisConfig) -> VisRoot:
    """Collect the requested sample frames into a VisRoot."""
    output = args.output if args.output is not None else cfg.output_path
    root = VisRoot(output)
    mode = args.mode or cfg.default_mode
    if args.sample in ("snake", "all"):
        root.add_frames(mode, samples.snake_frames(max(1, args.size)))
    if args.sample in ("shapes", "all"):
        shapes_mode = mode if args.sample == "shapes" else f"{mode}_shapes"
        root.add_frame(shapes_mode, samples.shapes_frame())
    return root


def render_summary(root: VisRoot, console: Console) -> None:
    table = Table(title="Visualization output")
    table.add_column("Mode")
    table.add_column("Frames", justify="right")
    table.add_column("Bytes", justify="right")
    for mode in root.modes():
        frames = root.get_frames(mode) or []
        size = sum(len(frame.to_vis_string(mode)) for frame in frames)
        table.add_row(mode, str(len(frames)), str(size))
    console.print(table)
    destination = root.output_path if root.output_path is not None else "stderr"
    console.print(f"Written to {destination}")


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    # stderr may carry frames until the sink is known
    init_logging(console=False)

    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    cfg = load_config()
    if not cfg.enabled:
        logger.info("Visualization disabled by configuration")
        return 0

    root = build_root(args, cfg)
    if root.output_path is not None:
        attach_console()
    if not root.output_all():
        print(f"Could not write {root.output_path}", file=sys.stderr)
        return 1
    if not args.quiet:
        render_summary(root, Console())
    logger.info("Emitted %d modes", len(root.modes()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
