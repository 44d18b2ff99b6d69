#!/usr/bin/env python3
"""
huffman_cli.py : compress or decompress a single file

Usage:
    huffproc compress notes.txt                  #writes notes.txt.hf
    huffproc compress notes.txt --header counts  #counts header instead of the tree
    huffproc decompress notes.txt.hf -o copy.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from bit_stream import BitInputStream, BitOutputStream
from huffman_errors import HuffmanError, TruncatedStreamError
from huffman_header import HeaderFormat
from huffman_service import HuffmanService

logger = logging.getLogger(__name__)

SUFFIX = ".hf"


def default_output(src: Path, command: str) -> Path:
    if command == "compress":
        return src.with_name(src.name + SUFFIX)
    if src.suffix == SUFFIX:
        return src.with_suffix("")
    return src.with_name(src.name + ".out")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="huffproc", description="Two-pass Huffman file compressor.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log every pipeline stage")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log errors")

    sub = parser.add_subparsers(dest="command", required=True)

    comp = sub.add_parser("compress", help="compress SRC")
    comp.add_argument("src", type=Path)
    comp.add_argument("-o", "--output", type=Path, default=None)
    comp.add_argument(
        "--header", choices=[f.name.lower() for f in HeaderFormat], default="tree",
        help="header layout written in front of the codes (default: tree)",
    )

    decomp = sub.add_parser("decompress", help="decompress SRC")
    decomp.add_argument("src", type=Path)
    decomp.add_argument("-o", "--output", type=Path, default=None)
    return parser


def run(args) -> None:
    if not args.src.is_file():
        raise SystemExit(f"{args.src}: no such file")
    dst = args.output or default_output(args.src, args.command)

    with open(args.src, "rb") as fp:
        inp = BitInputStream.from_file(fp)
    out = BitOutputStream()

    if args.command == "compress":
        service = HuffmanService(HeaderFormat[args.header.upper()])
        service.compress_stream(inp, out)
    else:
        service = HuffmanService()
        try:
            service.decompress_stream(inp, out)
        except TruncatedStreamError:
            #Keep what was decoded, then report the failure
            with open(dst, "wb") as fp:
                out.flush(fp)
            raise

    with open(dst, "wb") as fp:
        out.flush(fp)

    orig_size = args.src.stat().st_size
    new_size = dst.stat().st_size
    if args.command == "compress":
        ratio = round(orig_size / new_size, 3) if new_size else None
        print(f"{args.src} -> {dst}: {orig_size} -> {new_size} bytes (ratio {ratio})")
    else:
        print(f"{args.src} -> {dst}: {new_size} bytes")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        run(args)
    except HuffmanError as exc:
        logger.debug("failed on %s", args.src, exc_info=True)
        raise SystemExit(f"{args.src}: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
