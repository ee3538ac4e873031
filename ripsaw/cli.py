"""
Interactive cut list builder.

Usage:
    ripsaw                      # specs are actual measurements
    ripsaw --nominal            # specs are nominal call-outs (2x4x8)
    ripsaw --pdf cutlist.pdf    # also write a PDF

Enter one spec per line (e.g. 2x4x8, 2"x4"x96"). A line containing q, or
end of input, prints the cut list. Blade width and other defaults come
from RIPSAW_* environment variables or .env.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import CutSettings, settings
from .pdf_generator import generate_cut_list_pdf
from .sizing import CutList, Lumber, LumberError

logger = logging.getLogger("ripsaw")

PROMPT = "Enter your lumber need (q to quit): "


def read_cut_list(lines, cut_list: CutList, nominal: bool = False, out=None) -> CutList:
    """
    Feed spec lines into cut_list until a quit line or end of input.
    Bad specs are logged and skipped; nothing is added for them.
    """
    out = out or sys.stdout
    for line in lines:
        if "q" in line:
            break
        if not line.strip():
            continue
        try:
            lumber = Lumber.create_from_spec(line, nominal=nominal)
        except LumberError as e:
            logger.warning("Rejected %r: %s", line.strip(), e)
            print(f"Invalid spec: {e}", file=out)
        else:
            cut_list.add(lumber)
        print(PROMPT, end="", file=out, flush=True)
    return cut_list


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ripsaw",
        description="Build a lumber cut list from specs like 2x4x8",
    )
    parser.add_argument(
        "--nominal", action="store_true", default=None,
        help="Treat specs as nominal sizes (default: RIPSAW_DEFAULT_NOMINAL or actual)",
    )
    parser.add_argument(
        "--blade-width", type=float, default=None,
        help=f"Blade width in inches (default: {settings.BLADE_WIDTH_INCHES})",
    )
    parser.add_argument("--pdf", type=Path, default=None, help="Also write the cut list to this PDF")
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.blade_width is not None:
        cut_settings = CutSettings(blade_width_inches=args.blade_width)
    else:
        cut_settings = settings.cut_settings()
    nominal = settings.DEFAULT_NOMINAL if args.nominal is None else args.nominal

    cut_list = CutList(cut_settings)
    print(PROMPT, end="", flush=True)
    read_cut_list(sys.stdin, cut_list, nominal=nominal)
    print()
    print(cut_list)

    if args.pdf:
        args.pdf.write_bytes(
            generate_cut_list_pdf(list(cut_list.entries()), cut_settings, shop_name=settings.SHOP_NAME)
        )
        logger.info("Wrote %s", args.pdf)
    return 0


if __name__ == "__main__":
    sys.exit(main())
