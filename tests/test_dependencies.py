"""Tests for recursive dependency resolution."""

from pathlib import Path

from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from spork.domain.dependencies import Dependency, flatten_dependencies, resolve_dependencies
from spork.domain.targets import Target
from spork.errors import NoExecutableDependencies, NoSporkToml, NoTargetSupportDependency

LINUX = Target.parse("x86_64-linux")
WINDOWS = Target.parse("x86_64-windows")


def _value(result):
    return unsafe_perform_io(result.unwrap())


def _failure(result):
    assert not is_successful(result)
    return unsafe_perform_io(result.failure())


def test_no_dependencies(tmp_path: Path) -> None:
    assert _value(resolve_dependencies(tmp_path, None, LINUX)) is None
    assert _value(resolve_dependencies(tmp_path, (), LINUX)) == {}


def test_nested_tree(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "app", "app", dependencies=("../mathlib",))
    write_project(
        tmp_path / "mathlib", "mathlib", kind="library", dependencies=("vendor/core",)
    )
    write_project(tmp_path / "mathlib" / "vendor" / "core", "core", kind="library")

    app = tmp_path / "app"
    deps = _value(resolve_dependencies(app, ("../mathlib",), LINUX))

    mathlib = Path(app, "../mathlib")
    assert deps == {
        mathlib: Dependency(
            name="mathlib",
            deps={Path(mathlib, "vendor/core"): Dependency(name="core", deps=None)},
        )
    }


def test_duplicate_paths_collapse(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "lib", "lib", kind="library")

    deps = _value(resolve_dependencies(tmp_path, ("lib", "lib", "lib/"), LINUX))

    assert list(deps) == [tmp_path / "lib"]


def test_same_name_different_paths(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "a", "util", kind="library")
    write_project(tmp_path / "b", "util", kind="library")

    deps = _value(resolve_dependencies(tmp_path, ("a", "b"), LINUX))

    assert len(deps) == 2


def test_resolution_is_idempotent(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "lib", "lib", kind="library", dependencies=("../base",))
    write_project(tmp_path / "base", "base", kind="library")

    first = _value(resolve_dependencies(tmp_path, ("lib", "base"), LINUX))
    second = _value(resolve_dependencies(tmp_path, ("lib", "base"), LINUX))

    assert first == second


def test_executable_dependency_is_rejected(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "tool", "tool", kind="executable")

    for target in (LINUX, WINDOWS):
        error = _failure(resolve_dependencies(tmp_path, ("tool",), target))
        assert isinstance(error, NoExecutableDependencies)
        assert error.name == "tool"


def test_nested_executable_dependency_is_rejected(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "lib", "lib", kind="library", dependencies=("../tool",))
    write_project(tmp_path / "tool", "tool", kind="executable")

    error = _failure(resolve_dependencies(tmp_path, ("lib",), LINUX))

    assert isinstance(error, NoExecutableDependencies)


def test_target_support(tmp_path: Path, write_project) -> None:
    write_project(tmp_path / "lib", "lib", kind="library", targets=("x86_64-linux",))

    assert is_successful(resolve_dependencies(tmp_path, ("lib",), LINUX))
    error = _failure(resolve_dependencies(tmp_path, ("lib",), WINDOWS))
    assert isinstance(error, NoTargetSupportDependency)
    assert (error.dep, error.target) == ("lib", "x86_64-windows")


def test_missing_dependency_manifest(tmp_path: Path) -> None:
    error = _failure(resolve_dependencies(tmp_path, ("nowhere",), LINUX))

    assert isinstance(error, NoSporkToml)


def test_flatten_puts_dependencies_first(tmp_path: Path) -> None:
    core = Dependency(name="core")
    deps = {
        tmp_path / "lib": Dependency(name="lib", deps={tmp_path / "core": core}),
        tmp_path / "core": core,
    }

    assert [dep.name for dep in flatten_dependencies(deps).values()] == ["core", "lib"]
