#!/usr/bin/env python3
"""
minigrep: print every line of a file that contains a given string.

    python grep.py <query> <file_path>
    IGNORE_CASE=1 python grep.py <query> <file_path>
"""
import os
import sys
from pathlib import Path

from grep_config import Config, UsageError, build_config, load_env
from grep_search import IoError, find_matches, read_contents


def run(config: Config, out=None) -> list[str]:
    """Reads the file, searches it and writes the matching lines to out (stdout by default)."""
    if out is None:
        out = sys.stdout

    contents = read_contents(config.file_path)
    results = find_matches(config, contents)

    for line in results:
        print(line, file=out)

    return results


def use_utf8_stdout() -> None:
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def detach_stdout() -> None:
    # The reader is gone; point stdout at devnull so the flush at exit does not fail again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv

    load_env()

    try:
        config = build_config(argv)
    except UsageError as err:
        prog = Path(argv[0]).name if argv else "minigrep"
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        print(f"Usage: {prog} <query> <file_path>", file=sys.stderr)
        return 1

    use_utf8_stdout()

    try:
        run(config)
        sys.stdout.flush()
    except IoError as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        detach_stdout()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
