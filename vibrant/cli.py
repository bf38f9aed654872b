import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import VibrantError
from .parsing import parse
from .receiver import RecvTag, recv_init
from .types.precision import Precision

FORMAT_TAGS = {
    "u8": RecvTag.VAL_U8,
    "f32": RecvTag.VAL_F32,
    "f64": RecvTag.VAL_F64,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vibrant",
        description="Parse a CSS color string and print its r g b a channels.",
    )
    parser.add_argument("color", help="hex, color function or keyword, e.g. 'hsl(180 50% 50%)'")
    parser.add_argument(
        "--format",
        choices=sorted(FORMAT_TAGS),
        default="u8",
        help="output channels as bytes or unit floats (default: u8)",
    )
    parser.add_argument(
        "--precision",
        choices=[p.value for p in Precision],
        default=Precision.DOUBLE.value,
        help="numeric width used while parsing (default: double)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log why a color was rejected")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_channels(channels, fmt: str) -> str:
    if fmt == "u8":
        return " ".join(str(int(c)) for c in channels)
    return " ".join(f"{float(c):.6f}" for c in channels)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    receiver = recv_init(FORMAT_TAGS[args.format])
    try:
        parse(args.color, receiver, precision=args.precision)
    except VibrantError as exc:
        print(f"vibrant: invalid color {args.color!r}: {exc}", file=sys.stderr)
        return 2

    print(format_channels(receiver.value, args.format))
    return 0
