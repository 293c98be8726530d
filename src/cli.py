"""Command-line interface for gomodreport."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from errors import ConfigError, GoListError, GoModReportError
from report.build import report_from_listing
from report.render import render_report, write_report
from settings.config import GoModReportConfig, load_config
from toolchain.golist import collect_listing
from utils import configure_logging

logger = logging.getLogger(__name__)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default=None,
        help="Report format (default: config format, else text)",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--strict-deps",
        action="store_true",
        default=None,
        help="Fail when a dependency names a package missing from the listing",
    )
    parser.add_argument(
        "--strict-module-spec",
        action="store_true",
        default=None,
        help="Fail on module specs with unexpected extra fields",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gomodreport")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser(
        "report", help="Run go list in a module and report its dependencies"
    )
    report_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory of the main package (default: .)",
    )
    report_parser.add_argument(
        "--main",
        default=None,
        help="Main package import path (default: output of `go list`)",
    )
    report_parser.add_argument(
        "--go",
        default=None,
        help="Go executable (default: config go_binary)",
    )
    report_parser.add_argument(
        "--no-prime",
        dest="prime",
        action="store_false",
        default=None,
        help="Skip the cache-priming listing run",
    )
    _add_common_options(report_parser)

    parse_parser = subparsers.add_parser(
        "parse", help="Report on a saved go list output file"
    )
    parse_parser.add_argument(
        "listing",
        help="File holding go list -deps output, or - for stdin",
    )
    parse_parser.add_argument(
        "--main",
        required=True,
        help="Main package import path",
    )
    _add_common_options(parse_parser)

    return parser


def _pick(flag: Any, configured: Any) -> Any:
    """Return the CLI flag value, or the configured value when it was omitted."""
    return configured if flag is None else flag


def _read_listing(listing: str) -> str:
    if listing == "-":
        return sys.stdin.read()
    return Path(listing).expanduser().read_text(encoding="utf-8")


def _emit(
    args: argparse.Namespace, config: GoModReportConfig, output: str, main: str
) -> int:
    report = report_from_listing(
        output,
        main,
        strict_deps=_pick(args.strict_deps, config.strict_deps),
        strict_module_spec=_pick(args.strict_module_spec, config.strict_module_spec),
    )
    report_format = _pick(args.format, config.format)
    if args.out is not None:
        out_path = Path(args.out).expanduser().resolve()
        try:
            write_report(out_path, report, report_format)
        except OSError as exc:
            sys.stderr.write(f"out: {out_path}\n")
            sys.stderr.write(f"error: {exc}\n")
            return 2
        logger.info("wrote %s report to %s", report_format, out_path)
    else:
        sys.stdout.write(render_report(report, report_format))
    return 0


def _handle_report(args: argparse.Namespace) -> int:
    root = Path(args.root).expanduser().resolve()
    config = load_config(root)
    listing = collect_listing(
        root,
        go_binary=_pick(args.go, config.go_binary),
        prime=_pick(args.prime, config.prime_cache),
        main_package=args.main,
    )
    return _emit(args, config, listing.output, listing.main_package)


def _handle_parse(args: argparse.Namespace) -> int:
    config = load_config(Path.cwd())
    try:
        output = _read_listing(args.listing)
    except (OSError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"listing: {args.listing}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    return _emit(args, config, output, args.main)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.command == "report":
            return _handle_report(args)

        if args.command == "parse":
            return _handle_parse(args)
    except (ConfigError, GoListError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except GoModReportError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
