import json
from pathlib import Path
import subprocess

from returns.io import IOResultE, impure_safe

from spork import log
from spork.domain.compiler import (
    HEADER_SUFFIXES,
    SOURCE_SUFFIXES,
    CompilerContext,
    compile_all_obj_files,
    link,
)
from spork.domain.context import BuildInfo, dependency_build_info
from spork.domain.dependencies import Dependency
from spork.domain.entities import BuildStructure, CompileCommand
from spork.domain.services import sequence
from spork.errors import (
    CompilationFailed,
    CouldntChangeWorkDir,
    FailedRunZigcc,
    LinkFailed,
    NoSourceFiles,
)
from spork.files import create_dir, create_file, walk_files


def _build_command_run(cmd: CompileCommand, directory: Path, verbose: bool) -> bool:
    if verbose:
        print(" ".join(cmd.command))
    try:
        return subprocess.run(cmd.command, cwd=directory).returncode == 0
    except OSError as e:
        raise FailedRunZigcc(e) from e


def collect_sources(structure: BuildStructure) -> tuple[Path, ...]:
    """Source files relative to the project directory. Headers are skipped."""
    sources: list[Path] = []
    for file in walk_files(structure.project / structure.src):
        relative = file.relative_to(structure.project)
        if relative.suffix in SOURCE_SUFFIXES:
            sources.append(relative)
        elif relative.suffix not in HEADER_SUFFIXES:
            log.warning(f"skipping '{relative}': unsupported file type")
    return tuple(sources)


def write_compile_commands(
    structure: BuildStructure, commands: tuple[CompileCommand, ...]
) -> Path:
    return create_file(
        structure.project / structure.out / "compile_commands.json",
        json.dumps(
            [
                {
                    "directory": str(structure.project),
                    "file": str(cmd.input_files[0]),
                    "arguments": list(cmd.command),
                    "output": str(cmd.output_path),
                }
                for cmd in commands
            ],
            indent=2,
        ),
    )


@impure_safe
def _build_project(directory: Path, info: BuildInfo, verbose: bool) -> Path:
    structure = info.structure(directory)
    context = CompilerContext(info=info, structure=structure)

    log.progress(f"building '{info.name}' ({info.target}, {info.mode})")
    src_files = collect_sources(structure)
    if not src_files:
        raise NoSourceFiles(info.name)

    create_dir(directory / structure.obj)
    commands = compile_all_obj_files(src_files)(context)
    write_compile_commands(structure, commands)

    # Every file gets compiled, so all errors show up in a single run.
    failed = False
    for n, cmd in enumerate(commands):
        print(f"  [{n / len(commands):5.0%} ] compiling '{cmd.input_files[0]}'")
        if not _build_command_run(cmd, directory, verbose):
            failed = True
    if failed:
        raise CompilationFailed()

    link_cmd = link(cmd.output_path for cmd in commands)(context)
    print(f"  [ 100% ] linking '{link_cmd.output_path}'")
    if not _build_command_run(link_cmd, directory, verbose):
        raise LinkFailed()

    info.output_path = directory / link_cmd.output_path
    return info.output_path


def _build_dependency(
    info: BuildInfo, path: Path, dep: Dependency, verbose: bool
) -> IOResultE[Path]:
    if not path.is_dir():
        return IOResultE.from_failure(CouldntChangeWorkDir(path))
    return build_bin(path, dependency_build_info(info, dep.name, dep.deps), verbose)


def build_bin(directory: Path, info: BuildInfo, verbose: bool = False) -> IOResultE[Path]:
    """Builds the dependencies of 'info' depth first, then the project in 'directory'."""
    return sequence(
        (info.dependencies or {}).items(),
        lambda item: _build_dependency(info, *item, verbose),
    ).bind(lambda _: _build_project(directory, info, verbose))
