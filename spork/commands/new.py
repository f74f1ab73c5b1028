from pathlib import Path
import subprocess

from returns.io import impure_safe

from spork import log
from spork.domain.config import ProjectInfo, check_project_name, dump_project
from spork.errors import FailedRunGitInit
from spork.files import create_dir, create_file, is_empty_dir
from spork.types import SPORK_FILE_NAME, Kind

MAIN_C = """\
#include <stdio.h>

int main(void) {
    printf("Hello, world!\\n");
    return 0;
}
"""

CLANG_FORMAT = """\
BasedOnStyle: LLVM
IndentWidth: 4
ColumnLimit: 100
AllowShortFunctionsOnASingleLine: Empty
"""

GITIGNORE = """\
.vscode
bin
"""


def _git_init(path: Path):
    try:
        res = subprocess.run(("git", "init", "--quiet", str(path)))
    except OSError as e:
        raise FailedRunGitInit(path, e) from e
    if res.returncode != 0:
        raise FailedRunGitInit(path, f"git exited with status {res.returncode}")


def create_project(name: str, path: Path, kind: Kind) -> Path:
    """Writes the skeleton of a new project into 'path'."""
    check_project_name(name)

    create_dir(path / "src")
    if kind == "executable":
        create_file(path / "src" / "main.c", MAIN_C)
    else:
        create_file(path / "include" / name / "entry.h", "#pragma once\n")

    create_file(path / ".clang-format", CLANG_FORMAT)
    create_file(path / ".gitignore", GITIGNORE)
    create_file(path / SPORK_FILE_NAME, dump_project(ProjectInfo(name=name, kind=kind)))

    _git_init(path)
    log.success(f"created {kind} project '{name}'")
    return path


def _create(name: str, path: Path, lib: bool, force: bool) -> int:
    check_project_name(name)
    if not is_empty_dir(path) and not force:
        log.warning("directory is not empty: use --force to override")
        return 0
    create_project(name, path, "library" if lib else "executable")
    return 0


@impure_safe
def new(args) -> int:
    return _create(args.name, Path(args.dir, args.name), args.lib, args.force)


@impure_safe
def init(args) -> int:
    path = Path(args.dir).absolute()
    return _create(path.name, path, args.lib, args.force)
