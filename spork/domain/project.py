from pathlib import Path
import subprocess

from returns.io import IOResultE, impure_safe

from spork import log
from spork.domain.builder import build_bin
from spork.domain.config import Manifest, ProjectInfo, WorkspaceInfo, parse_manifest
from spork.domain.context import BuildInfo, create_build_infos
from spork.domain.dependencies import Dependencies, resolve_dependencies
from spork.domain.services import flatten, sequence
from spork.domain.targets import Target
from spork.domain.workspace import materialize_member, workspace_members
from spork.errors import CannotRunLib, FailedRunOutput, NoNestedWorkspaces, NoSupportedTargets


def _with_dependencies(info: BuildInfo, deps: Dependencies | None) -> BuildInfo:
    info.dependencies = deps
    return info


def build_single_project(
    directory: Path,
    project: ProjectInfo,
    release: bool,
    all_targets: bool,
    host: Target,
    verbose: bool = False,
) -> IOResultE[tuple[BuildInfo, ...]]:
    """Builds 'project' once per selected target, stopping at the first failure."""

    def _build(info: BuildInfo) -> IOResultE[BuildInfo]:
        return (
            resolve_dependencies(directory, project.dependencies, info.target)
            .map(lambda deps: _with_dependencies(info, deps))
            .bind(lambda info: build_bin(directory, info, verbose))
            .map(lambda _: info)
        )

    return create_build_infos(project, release, all_targets, host).bind(
        lambda infos: sequence(infos, _build)
    )


def _build_member(
    path: Path, release: bool, all_targets: bool, host: Target, verbose: bool
) -> IOResultE[tuple[BuildInfo, ...]]:
    def _build(manifest: Manifest) -> IOResultE[tuple[BuildInfo, ...]]:
        if isinstance(manifest, WorkspaceInfo):
            return IOResultE.from_failure(NoNestedWorkspaces(path))
        return build_single_project(path, manifest, release, all_targets, host, verbose)

    return parse_manifest(path).bind(_build)


def build_workspace(
    directory: Path,
    workspace: WorkspaceInfo,
    release: bool,
    all_targets: bool,
    host: Target,
    verbose: bool = False,
) -> IOResultE[tuple[BuildInfo, ...]]:
    return (
        workspace_members(workspace)
        .bind(
            lambda members: sequence(
                members,
                lambda member: materialize_member(directory, *member).bind(
                    lambda path: _build_member(path, release, all_targets, host, verbose)
                ),
            )
        )
        .map(flatten)
    )


def build_project(
    directory: Path,
    release: bool,
    all_targets: bool,
    host: Target,
    verbose: bool = False,
) -> IOResultE[tuple[BuildInfo, ...]]:
    directory = directory.absolute()

    def _build(manifest: Manifest) -> IOResultE[tuple[BuildInfo, ...]]:
        if isinstance(manifest, WorkspaceInfo):
            return build_workspace(directory, manifest, release, all_targets, host, verbose)
        return build_single_project(directory, manifest, release, all_targets, host, verbose)

    return parse_manifest(directory).bind(_build)


@impure_safe
def run_artifacts(infos: tuple[BuildInfo, ...], host: Target) -> tuple[Path, ...]:
    """Runs every executable that was built for the host.

    Libraries are skipped, so a workspace mixing both runs its executables.
    """
    runnable = tuple(info for info in infos if info.target == host)
    if not runnable:
        raise NoSupportedTargets(str(host))
    executables = tuple(info for info in runnable if info.kind == "executable")
    if not executables:
        raise CannotRunLib(runnable[0].name)

    outputs = tuple(info.output_path for info in executables if info.output_path)
    for output in outputs:
        log.progress(f"running '{output}'")
        try:
            subprocess.run((str(output),))
        except KeyboardInterrupt:
            pass
        except OSError as e:
            raise FailedRunOutput(output, e) from e
    return outputs


def run_project(
    directory: Path,
    release: bool,
    all_targets: bool,
    host: Target,
    verbose: bool = False,
) -> IOResultE[tuple[Path, ...]]:
    return build_project(directory, release, all_targets, host, verbose).bind(
        lambda infos: run_artifacts(infos, host)
    )
