"""Command line interface for listing, setting, erasing and scanning tags."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from xtag.formatter import Formatter
from xtag.instance import Instance, ScanFilter, ScanInfo
from xtag.types import ExitCode, XtagError

_VERSION = "0.1.1"

Handler = Callable[[Instance, argparse.Namespace], ExitCode]


def _list(instance: Instance, args: argparse.Namespace) -> ExitCode:
    entry = instance.get_tags(args.path)
    print(Formatter().join(entry.tags))
    return ExitCode.SUCCESS


def _replace(instance: Instance, args: argparse.Namespace) -> ExitCode:
    instance.replace_tags(args.path, args.tags)
    print("tags replaced successfully")
    return ExitCode.SUCCESS


def _append(instance: Instance, args: argparse.Namespace) -> ExitCode:
    instance.append_tags(args.path, args.tags)
    print("tags appended successfully")
    return ExitCode.SUCCESS


def _erase(instance: Instance, args: argparse.Namespace) -> ExitCode:
    instance.erase_tags(args.path)
    print("tags erased successfully")
    return ExitCode.SUCCESS


def _scan(instance: Instance, args: argparse.Namespace) -> ExitCode:
    info = ScanInfo(
        filter=ScanFilter(tags=list(args.tags), include_files=args.include_files),
        depth=args.depth,
    )
    result = instance.scan_directory(Path(args.path).absolute(), info)
    result.sort_entries()
    print(Formatter().format_table(result))
    return ExitCode.SUCCESS


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="xtag", description="xattr tags manipulator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-a", "--attr-name", dest="attr_name", default="", help="custom attribute name")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    list_cmd = commands.add_parser("list")
    list_cmd.add_argument("path", nargs="?", default=".", metavar="PATH", help="path (default=.)")
    list_cmd.set_defaults(handler=_list)

    for name, handler in (("replace", _replace), ("append", _append)):
        sub = commands.add_parser(name)
        sub.add_argument("path", metavar="PATH")
        sub.add_argument("tags", nargs="*", metavar="TAGS")
        sub.set_defaults(handler=handler)

    erase_cmd = commands.add_parser("erase")
    erase_cmd.add_argument("path", nargs="?", default=".", metavar="PATH", help="path (default=.)")
    erase_cmd.set_defaults(handler=_erase)

    scan_cmd = commands.add_parser("scan")
    scan_cmd.add_argument("-f", "--include-files", dest="include_files", action="store_true")
    scan_cmd.add_argument("-d", "--depth", type=int, default=10, help="iteration depth (default: 10)")
    scan_cmd.add_argument("path", metavar="PATH")
    scan_cmd.add_argument("tags", nargs="*", metavar="TAGS")
    scan_cmd.set_defaults(handler=_scan)

    return parser


def _run(argv: Sequence[str] | None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exit_request:
        code = exit_request.code
        if code is None:
            return ExitCode.SUCCESS
        return code if isinstance(code, int) else ExitCode.FAILURE

    instance = Instance(args.attr_name)
    handler: Handler = args.handler
    try:
        return int(handler(instance, args))
    except XtagError as err:
        print(err.message)
        return int(err.exit_code)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit code."""
    try:
        return _run(argv)
    except Exception as exc:  # noqa: BLE001
        print(f"PANIC: {exc}", file=sys.stderr)
        return int(ExitCode.FAILURE)


if __name__ == "__main__":
    sys.exit(main())