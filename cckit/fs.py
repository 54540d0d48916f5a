"""Filesystem helpers: path queries, file and directory operations.

Path strings returned by this module always use forward slashes.
Backslashes in input paths are treated as separators as well.
"""

from __future__ import annotations

import os
import shutil
import stat
from typing import Iterable, Optional, Union

PathArg = Union[str, "os.PathLike[str]"]


def _raw(path: PathArg) -> str:
    return os.fspath(path)


def _generic(path: PathArg) -> str:
    return _raw(path).replace("\\", "/")


def _file_name(generic: str) -> str:
    return generic[generic.rfind("/") + 1:]


def _split_suffix(name: str) -> tuple[str, str]:
    if name in (".", ".."):
        return name, ""
    pos = name.rfind(".")
    if pos <= 0:
        return name, ""
    return name[:pos], name[pos:]


def _parent(generic: str) -> str:
    if not generic.strip("/"):
        return generic[:1]
    idx = generic.rfind("/")
    if idx == -1:
        return ""
    head = generic[:idx].rstrip("/")
    if not head and generic.startswith("/"):
        return "/"
    return head


def _lexically_normal(generic: str) -> str:
    root = "/" if generic.startswith("/") else ""
    parts = generic.split("/")
    out: list[str] = []
    for part in parts:
        if part in ("", "."):
            continue
        if part == "..":
            if out and out[-1] != "..":
                out.pop()
                continue
            if root:
                continue
        out.append(part)
    if not out:
        return root or "."
    trailing = parts[-1] in ("", ".", "..")
    result = root + "/".join(out)
    if trailing and out[-1] != "..":
        result += "/"
    return result


# ----------------------------------------------------------------------
# Path queries
# ----------------------------------------------------------------------


def exists(path: PathArg) -> bool:
    return os.path.exists(_raw(path))


def is_regular_file(path: PathArg) -> bool:
    return os.path.isfile(_raw(path))


def is_directory(path: PathArg) -> bool:
    return os.path.isdir(_raw(path))


def get_separator() -> str:
    """The native path separator of this platform."""
    return os.sep


def get_generic_path(path: PathArg) -> str:
    return _generic(path)


def get_absolute_path(path: PathArg) -> str:
    """Absolute form of ``path`` relative to the working directory, not normalized."""
    return _generic(os.path.join(os.getcwd(), _raw(path)))


def get_current_directory() -> str:
    return _generic(os.getcwd())


def get_parent_path(path: PathArg) -> str:
    return _parent(_generic(path))


def get_file_name(path: PathArg) -> str:
    return _file_name(_generic(path))


def get_file_base(path: PathArg) -> str:
    return _split_suffix(_file_name(_generic(path)))[0]


def get_file_suffix(path: PathArg) -> str:
    return _split_suffix(_file_name(_generic(path)))[1]


def get_directory_path(path: PathArg) -> str:
    """Directory denoted by ``path``.

    An existing directory, or a path ending in a separator, is returned
    itself (lexically normalized); anything else yields its parent.
    Raises ValueError for an empty path.
    """
    raw = _raw(path)
    if not raw:
        raise ValueError("path must not be empty")
    generic = _generic(raw)
    normalized = _lexically_normal(generic)
    is_dir = os.path.isdir(raw) or generic.endswith("/")
    directory = normalized if is_dir else _parent(normalized)
    return directory or "."


def get_directory_name(path: PathArg) -> str:
    """Last component of :func:`get_directory_path`; "/" for the root."""
    directory = get_directory_path(path)
    if len(directory) > 1 and directory.endswith("/"):
        directory = directory[:-1]
    name = _file_name(directory)
    if not name:
        return "/" if directory.startswith("/") and not directory.strip("/") else "."
    return name


# ----------------------------------------------------------------------
# File operations
# ----------------------------------------------------------------------


def copy_file(src: PathArg, dst: PathArg, create_new_path: bool = False) -> bool:
    """Copy a regular file, overwriting ``dst``; True on success."""
    try:
        if create_new_path:
            parent = _parent(_generic(dst))
            if parent:
                os.makedirs(parent, exist_ok=True)
        if not os.path.isfile(_raw(src)):
            return False
        shutil.copyfile(_raw(src), _raw(dst))
        return True
    except OSError:
        return False


def _remove(path: PathArg) -> bool:
    raw = _raw(path)
    try:
        if not os.path.lexists(raw):
            return False
        if os.path.isdir(raw) and not os.path.islink(raw):
            os.rmdir(raw)
        else:
            os.remove(raw)
        return True
    except OSError:
        return False


def remove_file(path: PathArg) -> bool:
    """Remove a file (or empty directory); False if nothing was removed."""
    return _remove(path)


def get_file_size(path: PathArg) -> Optional[int]:
    """Size in bytes of a regular file, or None if it cannot be determined."""
    try:
        info = os.stat(_raw(path))
    except (OSError, ValueError):
        return None
    if not stat.S_ISREG(info.st_mode):
        return None
    return info.st_size


# ----------------------------------------------------------------------
# Directory operations
# ----------------------------------------------------------------------


def ensure_path_exists(path: PathArg) -> bool:
    """Make sure ``path`` is a directory, creating it with parents if needed."""
    raw = _raw(path)
    try:
        if os.path.exists(raw):
            return os.path.isdir(raw)
        os.makedirs(raw)
        return True
    except (OSError, ValueError):
        return False


def create_directory(path: PathArg) -> bool:
    """Create a directory with its parents; False if it already existed or failed."""
    raw = _raw(path)
    try:
        if os.path.exists(raw):
            return False
        os.makedirs(raw)
        return True
    except (OSError, ValueError):
        return False


def remove_directory(path: PathArg) -> bool:
    """Remove an empty directory (or a file); False if nothing was removed."""
    return _remove(path)


def remove_directory_all(path: PathArg) -> bool:
    """Remove ``path`` and everything under it; True if anything was removed."""
    raw = _raw(path)
    try:
        if not os.path.lexists(raw):
            return False
        if os.path.isdir(raw) and not os.path.islink(raw):
            shutil.rmtree(raw)
        else:
            os.remove(raw)
        return True
    except OSError:
        return False


def _parse_extensions(match_extensions: Optional[Iterable[str]]) -> set[str]:
    if not match_extensions:
        return set()
    return {ext for item in match_extensions for ext in item.split(",") if ext}


def list_files(folder: PathArg, match_extensions: Optional[Iterable[str]] = None) -> list[str]:
    """Regular files directly inside ``folder``, sorted.

    When ``match_extensions`` is given, only files whose suffix (such as
    ".txt") is in it are listed. A missing folder yields an empty list.
    """
    raw = _raw(folder)
    if not os.path.isdir(raw):
        return []
    extensions = _parse_extensions(match_extensions)
    base = _generic(raw)
    prefix = base if base.endswith("/") else base + "/"
    try:
        with os.scandir(raw) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_file()
                and (not extensions or _split_suffix(entry.name)[1] in extensions)
            ]
    except OSError:
        return []
    return [prefix + name for name in sorted(names)]