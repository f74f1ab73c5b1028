from dataclasses import dataclass
from enum import Enum
import subprocess

from returns.io import impure_safe

from spork.errors import BadTarget, FailedRunZigcc, InvalidTargetArch, InvalidTargetOS

ZIG = "zig"


class Architecture(Enum):
    X86 = "x86"
    X86_64 = "x86_64"

    @classmethod
    def parse(cls, arch: str) -> "Architecture":
        try:
            return cls(arch)
        except ValueError:
            raise InvalidTargetArch(arch) from None


class OperatingSystem(Enum):
    FREESTANDING = "freestanding"
    WINDOWS = "windows"
    LINUX = "linux"

    @classmethod
    def parse(cls, os: str) -> "OperatingSystem":
        try:
            return cls(os)
        except ValueError:
            raise InvalidTargetOS(os) from None

    @property
    def toolchain_name(self) -> str:
        return {
            OperatingSystem.FREESTANDING: "freestanding-none",
            OperatingSystem.WINDOWS: "windows-gnu",
            OperatingSystem.LINUX: "linux-gnu",
        }[self]


@dataclass(frozen=True)
class Target:
    arch: Architecture
    os: OperatingSystem

    @classmethod
    def parse(cls, triple: str, lenient: bool = False) -> "Target":
        """Parses 'arch-os'.

        Triples reported by the toolchain look like 'x86_64-unknown-linux-gnu';
        'lenient' drops the vendor component and anything after the os.
        """
        components = triple.strip().split("-") if lenient else triple.split("-")
        if lenient and len(components) > 2:
            del components[1]
        elif len(components) != 2:
            raise BadTarget(triple)
        return cls(
            arch=Architecture.parse(components[0]),
            os=OperatingSystem.parse(components[1]),
        )

    @property
    def toolchain_triple(self) -> str:
        return f"{self.arch.value}-{self.os.toolchain_name}"

    @property
    def is_windows(self) -> bool:
        return self.os == OperatingSystem.WINDOWS

    def __str__(self) -> str:
        return f"{self.arch.value}-{self.os.value}"


@impure_safe
def host_target() -> Target:
    """Asks the toolchain for the native target. Spawns one process per call."""
    try:
        output = subprocess.run(
            (ZIG, "cc", "-dumpmachine"), capture_output=True, text=True
        )
    except OSError as e:
        raise FailedRunZigcc(e) from e
    if output.returncode != 0:
        raise FailedRunZigcc(
            output.stderr.strip() or f"zig exited with status {output.returncode}"
        )
    return Target.parse(output.stdout, lenient=True)
