from dataclasses import dataclass
from pathlib import Path

from returns.io import impure_safe

from spork import log
from spork.domain.config import ProjectInfo
from spork.domain.dependencies import Dependencies
from spork.domain.entities import BuildStructure
from spork.domain.targets import Target
from spork.types import Kind, Mode


@dataclass()
class BuildInfo:
    name: str
    release: bool
    kind: Kind
    target: Target

    output_path: Path | None = None
    dependencies: Dependencies | None = None

    @property
    def mode(self) -> Mode:
        return "release" if self.release else "debug"

    def structure(self, directory: Path) -> BuildStructure:
        out = Path("bin", str(self.target), self.mode)
        return BuildStructure(
            project=directory,
            src=Path("src"),
            out=out,
            obj=out / "obj",
        )


def _select_targets(project: ProjectInfo, all_targets: bool, host: Target) -> tuple[Target, ...]:
    if project.targets is None:
        return (host,)
    if not project.targets:
        log.warning(f"project '{project.name}' declares no targets: nothing to build")
        return ()
    if all_targets:
        return tuple(Target.parse(target) for target in project.targets)
    return (Target.parse(project.targets[0]),)


@impure_safe
def create_build_infos(
    project: ProjectInfo, release: bool, all_targets: bool, host: Target
) -> tuple[BuildInfo, ...]:
    return tuple(
        BuildInfo(
            name=project.name,
            release=release,
            kind=project.kind,
            target=target,
        )
        for target in _select_targets(project, all_targets, host)
    )


def dependency_build_info(info: BuildInfo, name: str, deps: Dependencies | None) -> BuildInfo:
    return BuildInfo(
        name=name,
        release=info.release,
        kind="library",
        target=info.target,
        dependencies=deps,
    )
