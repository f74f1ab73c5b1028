from typing import Literal

Mode = Literal["debug", "release"]
Kind = Literal["executable", "library"]
Action = Literal["new", "init", "build", "run", "clean"]

KINDS: tuple[Kind, ...] = ("executable", "library")

Cmd = tuple[str, ...]

SPORK_FILE_NAME = "Spork.toml"
