from dataclasses import dataclass
from pathlib import Path
from typing import Any
import re

import toml
from returns.io import impure_safe

from spork.errors import BuildFileParseError, InvalidProjectName, NoSporkToml
from spork.types import KINDS, SPORK_FILE_NAME, Kind

_NAME_PATTERN = re.compile(r"[a-z_]+")


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    kind: Kind
    targets: tuple[str, ...] | None = None
    dependencies: tuple[str, ...] | None = None


@dataclass(frozen=True)
class WorkspaceInfo:
    workspace: dict[str, str]


Manifest = ProjectInfo | WorkspaceInfo


def is_valid_name(name: str) -> bool:
    return _NAME_PATTERN.fullmatch(name) is not None


def check_project_name(name: str) -> str:
    if not is_valid_name(name):
        raise InvalidProjectName(name)
    return name


def _string_list(table: dict[str, Any], key: str) -> tuple[str, ...] | None:
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'project.{key}' must be a list of strings")
    return tuple(value)


def _project_from_dict(config: dict[str, Any]) -> ProjectInfo:
    project = config.get("project")
    if not isinstance(project, dict):
        raise ValueError("missing table '[project]'")
    name = project.get("name")
    if not isinstance(name, str):
        raise ValueError("missing string field 'project.name'")
    kind = project.get("kind")
    if kind not in KINDS:
        raise ValueError(
            f"'project.kind' must be one of {', '.join(KINDS)}, found '{kind}'"
        )
    return ProjectInfo(
        name=name,
        kind=kind,
        targets=_string_list(project, "targets"),
        dependencies=_string_list(project, "dependencies"),
    )


def _workspace_from_dict(config: dict[str, Any]) -> WorkspaceInfo:
    workspace = config.get("workspace")
    if not isinstance(workspace, dict) or not all(
        isinstance(url, str) for url in workspace.values()
    ):
        raise ValueError("'[workspace]' must map member names to repository urls")
    return WorkspaceInfo(workspace=dict(workspace))


def parse_manifest_text(text: str) -> Manifest:
    """Project manifest first, workspace manifest second.

    When neither shape fits, the error of the project shape is reported.
    """
    try:
        config = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise BuildFileParseError(str(e)) from e

    try:
        return _project_from_dict(config)
    except ValueError as project_error:
        try:
            return _workspace_from_dict(config)
        except ValueError:
            raise BuildFileParseError(str(project_error)) from project_error


@impure_safe
def parse_manifest(directory: Path) -> Manifest:
    path = Path(directory, SPORK_FILE_NAME)
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError):
        raise NoSporkToml(path) from None
    return parse_manifest_text(text)


def dump_project(info: ProjectInfo) -> str:
    project: dict[str, Any] = {"name": info.name, "kind": info.kind}
    if info.targets is not None:
        project["targets"] = list(info.targets)
    if info.dependencies is not None:
        project["dependencies"] = list(info.dependencies)
    return toml.dumps({"project": project})
