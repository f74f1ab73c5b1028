from pathlib import Path
from typing import Protocol
import argparse

from spork.__version__ import __version__
from spork.types import Action


class ArgsConfig(Protocol):
    action: Action
    dir: Path
    verbose: bool

    name: str
    lib: bool
    force: bool

    release: bool
    all: bool


def args_parse(argv: list[str]) -> ArgsConfig:
    parser = argparse.ArgumentParser(
        prog="spork",
        description="Builds C projects with zig cc",
        epilog="",
    )
    parser.add_argument("-d", "--dir", type=Path, default=Path.cwd())
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    new = subparser.add_parser("new", help="Create a new spork project")
    new.add_argument("name")
    new.add_argument(
        "-l", "--lib", action="store_true", help="Create a library project"
    )
    new.add_argument(
        "-f", "--force", action="store_true", help="Create even if the directory is not empty"
    )

    init = subparser.add_parser(
        "init", help="Create a new spork project in the current directory"
    )
    init.add_argument(
        "-l", "--lib", action="store_true", help="Create a library project"
    )
    init.add_argument(
        "-f", "--force", action="store_true", help="Create even if the directory is not empty"
    )

    for action, description in (
        ("build", "Build the current project"),
        ("run", "Build and run the current project"),
    ):
        cmd = subparser.add_parser(action, help=description)
        cmd.add_argument(
            "-r", "--release", action="store_true", help="Build in release mode"
        )
        cmd.add_argument(
            "-a", "--all", action="store_true", help="Build for all targets"
        )

    subparser.add_parser("clean", help="Remove the 'bin' directory")

    return parser.parse_args(argv)  # type: ignore
