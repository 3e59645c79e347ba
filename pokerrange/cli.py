"""
Command-line front end for the range engine.

Usage:
    pokerrange parse "22+,ATs-A6s,KQo:0.5"
    pokerrange expand AKs
    pokerrange convert "AhKh:1,AsKs:1" --from combo --to shorthand
    pokerrange stats "AA,AKs"
    pokerrange import-hrc export.json

Results are printed as JSON. Notation errors exit with status 2.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pokerrange import __version__
from pokerrange.core.compressor import compress
from pokerrange.core.converter import convert
from pokerrange.core.errors import RangeError
from pokerrange.core.hand import expand
from pokerrange.core.parser import parse_range
from pokerrange.core.rules import FORMAT_ALIASES
from pokerrange.core.stats import calculate_stats
from pokerrange.importers.hrc import parse_hrc_json, validate_hrc_file


logger = logging.getLogger(__name__)


def cmd_parse(args: argparse.Namespace) -> Dict[str, Any]:
    grid = parse_range(args.range)
    result: Dict[str, Any] = {
        "notation": compress(grid),
        "stats": calculate_stats(grid).to_dict(),
    }
    if args.grid:
        result["grid"] = grid.to_dict()
    return result


def cmd_expand(args: argparse.Namespace) -> Dict[str, Any]:
    combos = [str(combo) for combo in expand(args.hand)]
    return {"hand": args.hand, "combos": combos, "count": len(combos)}


def cmd_convert(args: argparse.Namespace) -> Dict[str, Any]:
    converted = convert(args.range, args.from_format, args.to_format)
    return {
        "original": args.range,
        "converted": converted,
        "from_format": args.from_format,
        "to_format": args.to_format,
    }


def cmd_stats(args: argparse.Namespace) -> Dict[str, Any]:
    return calculate_stats(parse_range(args.range)).to_dict()


def cmd_import_hrc(args: argparse.Namespace) -> Dict[str, Any]:
    with open(args.file, "rb") as f:
        raw = f.read()
    return parse_hrc_json(validate_hrc_file(raw)).model_dump()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokerrange", description="Poker range notation engine")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("parse", help="Parse notation and print canonical form and stats")
    p.add_argument("range", help="Range notation, e.g. '22+,ATs-A6s'")
    p.add_argument("--grid", action="store_true", help="Include the 13x13 grid")
    p.set_defaults(handler=cmd_parse)

    p = commands.add_parser("expand", help="List the combos of one hand")
    p.add_argument("hand", help="Shorthand hand, e.g. 'AKs'")
    p.set_defaults(handler=cmd_expand)

    formats = sorted(FORMAT_ALIASES)
    p = commands.add_parser("convert", help="Convert between notation formats")
    p.add_argument("range", help="Range text in the source format")
    p.add_argument("--from", dest="from_format", default="shorthand", help=f"One of {', '.join(formats)}")
    p.add_argument("--to", dest="to_format", default="combo", help=f"One of {', '.join(formats)}")
    p.set_defaults(handler=cmd_convert)

    p = commands.add_parser("stats", help="Combo counts for a range")
    p.add_argument("range", help="Range notation")
    p.set_defaults(handler=cmd_stats)

    p = commands.add_parser("import-hrc", help="Import an HRC scenario export")
    p.add_argument("file", help="Path to the HRC JSON file")
    p.set_defaults(handler=cmd_import_hrc)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = args.handler(args)
    except RangeError as e:
        logger.debug(f"{args.command} failed on token {e.token!r}")
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
