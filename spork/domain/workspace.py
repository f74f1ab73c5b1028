from pathlib import Path
import subprocess

from returns.io import impure_safe

from spork import log
from spork.domain.config import WorkspaceInfo, is_valid_name
from spork.errors import FailedRunGitClone, InvalidWorkspaceMember
from spork.files import create_dir

GIT = "git"


def _git_clone(url: str, path: Path) -> None:
    try:
        res = subprocess.run((GIT, "clone", url, str(path)))
    except OSError as e:
        raise FailedRunGitClone(path, url, e) from e
    if res.returncode != 0:
        raise FailedRunGitClone(path, url, f"git exited with status {res.returncode}")


@impure_safe
def workspace_members(workspace: WorkspaceInfo) -> tuple[tuple[str, str], ...]:
    """Members in manifest order. All names are checked before anything is cloned."""
    for name in workspace.workspace:
        if not is_valid_name(name):
            raise InvalidWorkspaceMember(name)
    return tuple(workspace.workspace.items())


@impure_safe
def materialize_member(directory: Path, name: str, url: str) -> Path:
    path = Path(directory, name)
    # An existing directory is used as is, whatever it was cloned from.
    if not path.exists():
        log.progress(f"cloning '{url}' into '{name}'")
        create_dir(path)
        _git_clone(url, path)
    return path
