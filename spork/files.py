from pathlib import Path
import shutil

from spork.errors import CannotCreateDir, CannotCreateFile, CannotReadDir, CannotRemoveDir


def create_dir(path: Path) -> Path:
    """Creates the directory and all its parents"""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CannotCreateDir(path, e) from e
    return path


def create_file(path: Path, content: str) -> Path:
    create_dir(path.parent)
    try:
        path.write_text(content)
    except OSError as e:
        raise CannotCreateFile(path, e) from e
    return path


def remove_dir(path: Path) -> bool:
    if not path.exists():
        return False
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise CannotRemoveDir(path, e) from e
    return True


def is_empty_dir(path: Path) -> bool:
    if not path.exists():
        return True
    try:
        return next(path.iterdir(), None) is None
    except OSError as e:
        raise CannotReadDir(path, e) from e


def walk_files(path: Path) -> tuple[Path, ...]:
    """All files below 'path', in a stable order."""
    if not path.is_dir():
        return ()
    try:
        return tuple(sorted(f for f in path.rglob("*") if f.is_file()))
    except OSError as e:
        raise CannotReadDir(path, e) from e
