from __future__ import annotations

import os

"""Path helpers shared by the session and the filesystem adapter."""


def is_directory(path: str) -> bool:
    """Return True only for an existing directory; stat failures count as False."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def resolve_path(base: str, path: str) -> str:
    s = os.path.expanduser(str(path or "").strip())
    if not os.path.isabs(s):
        s = os.path.join(base, s)
    return os.path.normpath(s)


def display_path(label: str, root: str, path: str) -> str:
    """Re-express ``path`` (found under ``root``) relative to the label the user typed."""
    rel = os.path.relpath(path, root)
    if rel == os.curdir:
        return label
    return os.path.join(label, rel)
