from dataclasses import dataclass
from pathlib import Path

from returns.io import IOResultE

from spork.domain.config import Manifest, ProjectInfo, parse_manifest
from spork.domain.services import sequence
from spork.domain.targets import Target
from spork.errors import NoExecutableDependencies, NoTargetSupportDependency


@dataclass(frozen=True)
class Dependency:
    name: str
    deps: "Dependencies | None" = None


# Keyed by the path the dependency was referenced with, joined onto the
# directory of the project referencing it.
Dependencies = dict[Path, Dependency]


def _check_dependency(path: Path, manifest: Manifest, target: Target) -> IOResultE[ProjectInfo]:
    if not isinstance(manifest, ProjectInfo) or manifest.kind != "library":
        name = manifest.name if isinstance(manifest, ProjectInfo) else str(path)
        return IOResultE.from_failure(NoExecutableDependencies(name))
    if manifest.targets and str(target) not in manifest.targets:
        return IOResultE.from_failure(
            NoTargetSupportDependency(manifest.name, str(target))
        )
    return IOResultE.from_value(manifest)


def _resolve_dependency(path: Path, target: Target) -> IOResultE[tuple[Path, Dependency]]:
    return (
        parse_manifest(path)
        .bind(lambda manifest: _check_dependency(path, manifest, target))
        .bind(
            lambda project: resolve_dependencies(
                path, project.dependencies, target
            ).map(lambda deps: (path, Dependency(name=project.name, deps=deps)))
        )
    )


def resolve_dependencies(
    directory: Path, paths: tuple[str, ...] | None, target: Target
) -> IOResultE[Dependencies | None]:
    """Loads every dependency manifest below 'directory' into a tree.

    Only reads manifests. Fails on the first dependency that is not a library
    or that does not support 'target'.
    """
    if paths is None:
        return IOResultE.from_value(None)

    unique_paths = tuple(dict.fromkeys(Path(directory, p) for p in paths))
    return sequence(
        unique_paths, lambda path: _resolve_dependency(path, target)
    ).map(dict)


def flatten_dependencies(deps: Dependencies | None) -> Dependencies:
    """Depth first, dependencies before the projects that need them."""
    flat: Dependencies = {}
    for path, dep in (deps or {}).items():
        flat.update(flatten_dependencies(dep.deps))
        flat.setdefault(path, dep)
    return flat
