from collections.abc import Callable
from pathlib import Path
import subprocess

import pytest

from spork.domain.config import ProjectInfo, dump_project
from spork.types import SPORK_FILE_NAME


class FakeProcesses:
    """Stands in for 'subprocess.run': emulates 'zig cc', 'git' and built programs.

    Compiling writes the object file. Linking writes the artifact, but only if
    every '-l<name>' can be found in one of the '-L' directories, like a real
    linker would.
    """

    def __init__(self, host: str = "x86_64-unknown-linux-gnu"):
        self.host = host
        self.commands: list[tuple[tuple[str, ...], Path | None]] = []
        self.failing_sources: set[str] = set()
        self.failing_triples: set[str] = set()
        self.dumpmachine_error: str | None = None
        self.fail_link = False
        self.missing: set[str] = set()
        self.remotes: dict[str, Callable[[Path], None]] = {}

    def __call__(self, cmd, cwd=None, **kwargs) -> subprocess.CompletedProcess:
        cmd = tuple(map(str, cmd))
        self.commands.append((cmd, Path(cwd) if cwd else None))
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])

        if cmd[:3] == ("zig", "cc", "-dumpmachine"):
            if self.dumpmachine_error is not None:
                return subprocess.CompletedProcess(cmd, 1, stdout="", stderr=self.dumpmachine_error)
            return subprocess.CompletedProcess(cmd, 0, stdout=f"{self.host}\n", stderr="")
        if cmd[:2] == ("zig", "cc"):
            return self._zig_cc(cmd, Path(cwd) if cwd else Path.cwd())
        if cmd[:2] == ("git", "clone"):
            url, path = cmd[2], Path(cmd[3])
            if url not in self.remotes:
                return subprocess.CompletedProcess(cmd, 128)
            self.remotes[url](path)
            return subprocess.CompletedProcess(cmd, 0)
        return subprocess.CompletedProcess(cmd, 0)

    def _zig_cc(self, cmd: tuple[str, ...], cwd: Path) -> subprocess.CompletedProcess:
        output = Path(cwd, cmd[cmd.index("-o") + 1])
        if "-c" in cmd:
            if (
                Path(cmd[cmd.index("-c") + 1]).name in self.failing_sources
                or cmd[3] in self.failing_triples
            ):
                return subprocess.CompletedProcess(cmd, 1)
        else:
            if self.fail_link or not self._libraries_found(cmd, cwd):
                return subprocess.CompletedProcess(cmd, 1)
            for arg in cmd:
                if arg.startswith("-Wl,--out-implib,"):
                    Path(cwd, arg.split(",", 2)[2]).write_text("implib")
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(" ".join(cmd))
        return subprocess.CompletedProcess(cmd, 0)

    @staticmethod
    def _libraries_found(cmd: tuple[str, ...], cwd: Path) -> bool:
        lib_dirs = [Path(cwd, arg[2:]) for arg in cmd if arg.startswith("-L")]
        for name in (arg[2:] for arg in cmd if arg.startswith("-l")):
            candidates = (f"lib{name}.so", f"{name}.lib")
            if not any((d / c).exists() for d in lib_dirs for c in candidates):
                return False
        return True

    def calls(self, program: str) -> list[tuple[str, ...]]:
        return [cmd for cmd, _ in self.commands if cmd[0] == program]

    def compiles(self) -> list[tuple[str, ...]]:
        return [cmd for cmd, _ in self.commands if cmd[:2] == ("zig", "cc") and "-c" in cmd]

    def links(self) -> list[tuple[str, ...]]:
        return [
            cmd
            for cmd, _ in self.commands
            if cmd[:2] == ("zig", "cc") and "-c" not in cmd and "-dumpmachine" not in cmd
        ]


@pytest.fixture
def processes(monkeypatch) -> FakeProcesses:
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def _write_project(
    directory: Path,
    name: str,
    kind: str = "executable",
    targets: tuple[str, ...] | None = None,
    dependencies: tuple[str, ...] | None = None,
    sources: dict[str, str] | None = None,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / SPORK_FILE_NAME).write_text(
        dump_project(
            ProjectInfo(name=name, kind=kind, targets=targets, dependencies=dependencies)  # type: ignore
        )
    )
    for file, content in (sources if sources is not None else {"main.c": "int main(void) { return 0; }\n"}).items():
        path = directory / "src" / file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return directory


@pytest.fixture(name="write_project")
def write_project_fixture() -> Callable[..., Path]:
    return _write_project
