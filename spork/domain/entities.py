from dataclasses import dataclass
from pathlib import Path

from spork.types import Cmd


@dataclass(frozen=True)
class CompileCommand:
    """A single toolchain invocation, run from the project directory"""

    input_files: tuple[Path, ...]
    output_path: Path
    command: Cmd


@dataclass(frozen=True)
class BuildStructure:
    project: Path
    src: Path
    out: Path
    obj: Path
