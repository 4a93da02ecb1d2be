#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/main.py

import argparse
import json
import sys
from typing import List

from randomhue import __version__
from randomhue.core import config as c
from randomhue.core.bounds import DEFAULT_TABLE
from randomhue.core.errors import RandomHueError
from randomhue.logic.formats import ColorFormat
from randomhue.logic.generator import RandomColorGenerator
from randomhue.shared.logger import ConsoleSink, RandomHueArgumentParser, log
from randomhue.shared.preview import ensure_truecolor, print_swatch
from randomhue.shared.sanitizer import INPUT_HANDLERS


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for the randomhue command."""
    parser = RandomHueArgumentParser(
        prog="randomhue",
        description="randomhue: generate pleasant random colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"randomhue {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "--list-hues",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json", "prettyjson"],
        type=INPUT_HANDLERS["list_format"],
        help="list the hue buckets and their bounds, then exit",
    )

    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "-H",
        "--hue",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help="hue name, degree value (1-359) or hex color",
    )
    gen_group.add_argument(
        "-l",
        "--luminosity",
        type=INPUT_HANDLERS["luminosity"],
        choices=list(c.LUMINOSITIES),
        default=None,
        help="luminosity of the generated colors",
    )
    gen_group.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=None,
        help=f"number of colors to generate (max: {c.MAX_COUNT})",
    )
    gen_group.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducible colors",
    )

    out_group = parser.add_argument_group("output")
    out_group.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["format"],
        choices=[fmt.value for fmt in ColorFormat],
        default=ColorFormat.HEX.value,
        help="output format (default: hex)",
    )
    out_group.add_argument(
        "-a",
        "--alpha",
        type=INPUT_HANDLERS["alpha"],
        default=None,
        help="alpha for rgba and hsla (default: random)",
    )
    out_group.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the colors as a JSON array",
    )
    out_group.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="draw a truecolor swatch next to each hex color",
    )
    out_group.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="trace generation steps to stderr",
    )
    return parser


def handle_list_hues(fmt: str) -> None:
    rows = [
        {
            "name": color.name,
            "hue_range": list(color.hue_range) if color.hue_range is not None else None,
            "saturation_range": list(color.saturation_range),
            "brightness_range": list(color.brightness_range),
            "lower_bounds": [list(point) for point in color.lower_bounds],
        }
        for color in DEFAULT_TABLE
    ]
    if fmt == "json":
        print(json.dumps(rows))
        return
    if fmt == "prettyjson":
        print(json.dumps(rows, indent=4))
        return

    for row in rows:
        hue = "-" if row["hue_range"] is None else f"{row['hue_range'][0]}..{row['hue_range'][1]}"
        sat = f"{row['saturation_range'][0]}..{row['saturation_range'][1]}"
        print(f"{row['name']:<12}hue {hue:<10}saturation {sat}")


def render_colors(colors: List, args: argparse.Namespace) -> None:
    if args.json:
        print(json.dumps(colors))
        return

    for color in colors:
        text = color if isinstance(color, str) else ", ".join(str(v) for v in color)
        if args.preview:
            print_swatch(color, text)
        else:
            print(text)


def run(args: argparse.Namespace) -> int:
    if args.list_hues:
        handle_list_hues(args.list_hues)
        return 0

    if args.preview and args.format != ColorFormat.HEX.value:
        log("warning", "preview is only available for hex output, ignoring -p")
        args.preview = False
    if args.preview:
        ensure_truecolor()

    generator = RandomColorGenerator(sink=ConsoleSink())
    generator.set_verbose(args.verbose)

    try:
        result = generator.generate(
            hue=args.hue,
            luminosity=args.luminosity,
            count=args.count,
            seed=args.seed,
            format=args.format,
            alpha=args.alpha,
        )
    except RandomHueError as e:
        log("error", str(e))
        return 1

    # A batch of one comes back unwrapped
    if args.count is not None and args.count > 1:
        colors = result
    else:
        colors = [result]

    render_colors(colors, args)
    return 0


def main() -> None:
    """Main entry point for randomhue CLI"""
    parser = get_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
