from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from urllib.parse import quote

from returns.context import RequiresContext

from spork.domain.context import BuildInfo
from spork.domain.dependencies import flatten_dependencies
from spork.domain.entities import BuildStructure, CompileCommand
from spork.domain.targets import ZIG
from spork.types import Cmd

SOURCE_SUFFIXES = (".c",)
HEADER_SUFFIXES = (".h",)

STANDARD_FLAGS = (
    "-std=c17",
    "-Wall",
    "-Wextra",
    "-pedantic",
)

RELEASE_FLAGS = ("-O3",)

DEBUG_FLAGS = (
    "-O0",
    "-g",
    "-DDEBUG",
)


@dataclass(frozen=True)
class CompilerContext:
    info: BuildInfo
    structure: BuildStructure


def artifact_name(info: BuildInfo) -> str:
    if info.kind == "executable":
        return f"{info.name}.exe" if info.target.is_windows else info.name
    return f"{info.name}.dll" if info.target.is_windows else f"lib{info.name}.so"


def import_library_name(info: BuildInfo) -> str | None:
    """Windows libraries get a '.lib' next to the '.dll' to link against."""
    if info.kind == "library" and info.target.is_windows:
        return f"{info.name}.lib"
    return None


def obj_file_path(src_file: Path, structure: BuildStructure) -> Path:
    """'src/math/add.c' becomes 'obj/math%2Fadd.c.o'.

    All objects share one directory. Percent-encoding the relative path keeps
    names distinct, so 'a/b.c' and 'a.b.c' never share an object file.
    """
    relative = src_file.relative_to(structure.src).as_posix()
    return structure.obj / f"{quote(relative, safe='')}.o"


def dependency_out_dir(path: Path, info: BuildInfo) -> Path:
    return Path(path, "bin", str(info.target), info.mode)


def _toolchain(info: BuildInfo) -> Cmd:
    return (ZIG, "cc", "-target", info.target.toolchain_triple)


def compile_flags() -> RequiresContext[Cmd, CompilerContext]:
    def _inner(context: CompilerContext) -> Cmd:
        info = context.info
        library_flags: Cmd = (
            (
                f"-D{info.name.upper()}_EXPORTS",
                "-Isrc",
                *(() if info.target.is_windows else ("-fPIC",)),
            )
            if info.kind == "library"
            else ()
        )
        return (
            *STANDARD_FLAGS,
            "-Iinclude",
            *library_flags,
            *(f"-I{path / 'include'}" for path in flatten_dependencies(info.dependencies)),
            *(RELEASE_FLAGS if info.release else DEBUG_FLAGS),
        )

    return RequiresContext(_inner)


def compile_obj(src_file: Path) -> RequiresContext[CompileCommand, CompilerContext]:
    """Compiles one source file into its object file."""

    def _inner(context: CompilerContext) -> CompileCommand:
        obj_file = obj_file_path(src_file, context.structure)
        return CompileCommand(
            input_files=(src_file,),
            output_path=obj_file,
            command=(
                *_toolchain(context.info),
                *compile_flags()(context),
                "-c",
                str(src_file),
                "-o",
                str(obj_file),
            ),
        )

    return RequiresContext(_inner)


def compile_all_obj_files(
    src_files: Iterable[Path],
) -> RequiresContext[tuple[CompileCommand, ...], CompilerContext]:
    return RequiresContext(
        lambda context: tuple(compile_obj(file)(context) for file in src_files)
    )


def _dependency_link_flags(info: BuildInfo) -> Cmd:
    flags: list[str] = []
    for path, dep in flatten_dependencies(info.dependencies).items():
        out_dir = dependency_out_dir(path, info)
        flags.append(f"-L{out_dir}")
        flags.append(f"-l{dep.name}")
        if not info.target.is_windows:
            flags.append(f"-Wl,-rpath,{out_dir}")
    return tuple(flags)


def link(obj_files: Iterable[Path]) -> RequiresContext[CompileCommand, CompilerContext]:
    """Links the object files into the executable or shared library of the project.

    Release symbol stripping ('-s') happens here rather than on the compile
    step, where the compiler driver ignores it.
    """

    def _inner(context: CompilerContext) -> CompileCommand:
        info = context.info
        obj_files_tuple = tuple(obj_files)
        output_path = context.structure.out / artifact_name(info)
        implib = import_library_name(info)
        return CompileCommand(
            input_files=obj_files_tuple,
            output_path=output_path,
            command=(
                *_toolchain(info),
                *(("-shared",) if info.kind == "library" else ()),
                *(
                    (f"-Wl,--out-implib,{context.structure.out / implib}",)
                    if implib
                    else ()
                ),
                *(("-s",) if info.release else ()),
                *map(str, obj_files_tuple),
                *_dependency_link_flags(info),
                "-o",
                str(output_path),
            ),
        )

    return RequiresContext(_inner)
