from pathlib import Path

from spork.types import SPORK_FILE_NAME


class SporkError(Exception):
    """Base class of every error spork reports to the user."""


class InvalidProjectName(SporkError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"project name '{name}' is invalid: "
            "project names can only contain lowercase ASCII letters and underscores"
        )


class InvalidWorkspaceMember(SporkError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"workspace member '{name}' is invalid: "
            "member names can only contain lowercase ASCII letters and underscores"
        )


class CannotCreateFile(SporkError):
    def __init__(self, path: Path, err: OSError):
        self.path = path
        self.err = err
        super().__init__(f"cannot create file '{path}': {err}")


class CannotCreateDir(SporkError):
    def __init__(self, path: Path, err: OSError):
        self.path = path
        self.err = err
        super().__init__(f"cannot create directory at '{path}': {err}")


class CannotReadDir(SporkError):
    def __init__(self, path: Path, err: OSError):
        self.path = path
        self.err = err
        super().__init__(f"couldn't read directory '{path}': {err}")


class CannotRemoveDir(SporkError):
    def __init__(self, path: Path, err: OSError):
        self.path = path
        self.err = err
        super().__init__(f"couldn't remove directory '{path}': {err}")


class CouldntChangeWorkDir(SporkError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"couldn't change working directory to '{path}'")


class NoSporkToml(SporkError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"couldn't find '{path}' - use 'spork new' or 'spork init' to create a project"
        )


class BuildFileParseError(SporkError):
    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(f"failed to parse '{SPORK_FILE_NAME}':\n{diagnostic}")


class NoNestedWorkspaces(SporkError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"workspace member '{path}' is a workspace itself")


class NoExecutableDependencies(SporkError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"dependency '{name}' is not a library")


class NoTargetSupportDependency(SporkError):
    def __init__(self, dep: str, target: str):
        self.dep = dep
        self.target = target
        super().__init__(f"dependency '{dep}' does not support target '{target}'")


class FailedRunZigcc(SporkError):
    def __init__(self, err: OSError | str):
        self.err = err
        super().__init__(f"failed to run 'zig cc': {err}")


class FailedRunGitInit(SporkError):
    def __init__(self, path: Path, err: OSError | str):
        self.path = path
        self.err = err
        super().__init__(f"failed to initialize a git repository in '{path}': {err}")


class FailedRunGitClone(SporkError):
    def __init__(self, path: Path, url: str, err: OSError | str):
        self.path = path
        self.url = url
        self.err = err
        super().__init__(f"failed to clone '{url}' into '{path}': {err}")


class FailedRunOutput(SporkError):
    def __init__(self, path: Path, err: OSError):
        self.path = path
        self.err = err
        super().__init__(f"failed to run '{path}': {err}")


class CompilationFailed(SporkError):
    def __init__(self):
        super().__init__("compilation failed")


class LinkFailed(SporkError):
    def __init__(self):
        super().__init__("linking failed")


class CannotRunLib(SporkError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"'{name}' is a library: only executable projects can be run "
            "(use 'spork build' instead)"
        )


class NoSourceFiles(SporkError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"project '{name}' has no source files")


class NoSupportedTargets(SporkError):
    def __init__(self, host: str):
        self.host = host
        super().__init__(
            f"unable to run - built target does not match host target of '{host}'"
        )


class BadTarget(SporkError):
    def __init__(self, target: str):
        self.target = target
        super().__init__(f"target '{target}' must follow format 'arch-os'")


class InvalidTargetArch(SporkError):
    def __init__(self, arch: str):
        self.arch = arch
        super().__init__(f"target architecture '{arch}' is invalid")


class InvalidTargetOS(SporkError):
    def __init__(self, os: str):
        self.os = os
        super().__init__(f"target os '{os}' is invalid")
