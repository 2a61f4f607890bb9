"""Discovery of event files and directories below the events root."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

EXCLUDED_DIRS = frozenset({"node_modules", ".github", "dist"})
EVENT_SUFFIX = ".json"


@dataclass
class WalkResult:
    """Files and directories found under ``root``, as POSIX paths relative to it.

    The root directory itself is listed as ``"."``.
    """

    root: Path
    files: list[str] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def walk_events(root: Path, listing_file: str = ".ls") -> WalkResult:
    """Walk ``root`` for ``*.json`` files.

    Dependency, build and CI directories are pruned, as are hidden
    directories. Hidden *files* are still returned; the pipeline skips them.
    """
    result = WalkResult(root=root)
    if not root.is_dir():
        raise NotADirectoryError(f"Events directory not found: {root}")

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in EXCLUDED_DIRS and not _is_hidden(d)
        )
        rel_dir = Path(dirpath).relative_to(root)
        result.directories.append(rel_dir.as_posix())
        for name in sorted(filenames):
            if name == listing_file or not name.endswith(EVENT_SUFFIX):
                continue
            result.files.append((rel_dir / name).as_posix())
    return result
