from pathlib import Path

from returns.io import IOResultE, impure_safe

from spork import log
from spork.domain.config import Manifest, WorkspaceInfo, is_valid_name, parse_manifest
from spork.files import remove_dir


@impure_safe
def _clean(directory: Path, manifest: Manifest) -> int:
    projects = (
        tuple(
            Path(directory, member)
            for member in manifest.workspace
            if is_valid_name(member) and Path(directory, member).is_dir()
        )
        if isinstance(manifest, WorkspaceInfo)
        else (directory,)
    )
    for project in projects:
        if remove_dir(project / "bin"):
            log.progress(f"removed '{project / 'bin'}'")
    log.success("cleaned")
    return 0


def clean(args) -> IOResultE[int]:
    return parse_manifest(args.dir).bind(lambda manifest: _clean(args.dir, manifest))
