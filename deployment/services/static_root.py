import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticRootStatus:
    path: str
    exists: bool
    writable: bool
    file_count: int


def nearest_existing_ancestor(path):
    """Walk up from ``path`` until something that exists is found."""
    current = Path(os.path.abspath(path))
    while not current.exists():
        if current.parent == current:
            break
        current = current.parent
    return current


def is_writable(path):
    """Whether collectstatic could write into ``path``.

    A missing directory counts as writable when the closest existing ancestor
    is a writable directory, since collectstatic creates the missing levels.
    """
    target = Path(os.path.abspath(path))
    if target.exists():
        return target.is_dir() and os.access(target, os.W_OK | os.X_OK)

    ancestor = nearest_existing_ancestor(target)
    if not ancestor.is_dir():
        return False
    return os.access(ancestor, os.W_OK | os.X_OK)


def collected_files(static_root):
    root = Path(static_root)
    if not root.is_dir():
        return []
    return sorted(
        p.relative_to(root).as_posix()
        for p in root.rglob('*')
        if p.is_file()
    )


def inspect_static_root(static_root):
    path = os.path.abspath(static_root)
    status = StaticRootStatus(
        path=path,
        exists=os.path.isdir(path),
        writable=is_writable(path),
        file_count=len(collected_files(path)),
    )
    logger.debug("Inspected static root %s: %s", path, status)
    return status
