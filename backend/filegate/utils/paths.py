"""Path joining confined to a root directory."""

from __future__ import annotations

from pathlib import Path

from filegate.exceptions import DirectoryNotFoundError, PathOutsideRootError


def resolve_within(root: str | Path, relative: str | None = None) -> Path:
    """Join ``relative`` onto ``root`` and canonicalize the result.

    Leading separators on ``relative`` are ignored, so ``"/docs"`` means
    ``root/docs``. Raises PathOutsideRootError when ``..`` segments or
    symlinks lead outside the root, DirectoryNotFoundError when the OS
    rejects the path (overlong names, NUL bytes, symlink loops).
    """
    base = Path(root).resolve()
    if not relative:
        return base

    try:
        target = (base / relative.lstrip("/\\")).resolve()
    except (OSError, ValueError, RuntimeError) as e:
        raise DirectoryNotFoundError(relative) from e
    if target != base and base not in target.parents:
        raise PathOutsideRootError(relative)
    return target
