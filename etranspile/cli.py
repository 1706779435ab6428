"""Command-line entry point of the compiler."""

from __future__ import annotations

import argparse

from etranspile.project import Project
from etranspile.reader import read_file
from etranspile.tools import Log


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="etranspile")
    parser.add_argument("input_file", help="entry file of the project")
    args = parser.parse_args(argv)

    Log.write_line(">> Compiler started")
    project = Project(entry_file=args.input_file)
    read_file(args.input_file, project)
    Log.write_line(">> Compiler ended")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())