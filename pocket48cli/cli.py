"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from pocket48cli.live import live, video


def _parser(name: str, with_next: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=name)
    if with_next:
        parser.add_argument("-next", "--next", dest="next_page", default="", help="查询下一页")
    parser.add_argument("-format", "--format", dest="output_format", default="", help="输出格式。json或table")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``live`` or ``video`` command and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print("请输入正确的命令")
        return 1

    command, rest = args[0], args[1:]

    if command == "live":
        options = _parser("live", with_next=False).parse_args(rest)
        live(options.output_format)
        return 0

    if command == "video":
        options = _parser("video", with_next=True).parse_args(rest)
        video(options.next_page, options.output_format)
        return 0

    print(f"命令 {command} 不存在")
    return 1


if __name__ == "__main__":
    sys.exit(main())