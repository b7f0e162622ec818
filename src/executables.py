""" Locate executables on the search path. """
import os


def is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_executable(name: str, search_path: str|None = None) -> str|None:
    """
    Return the full path of the first executable called `name`.

    Directories come from `search_path` (default `$PATH`) in listed order;
    empty entries are skipped. A name containing a slash is checked as-is.
    """
    if not name:
        return None

    if "/" in name:
        return name if is_executable(name) else None

    if search_path is None:
        search_path = os.environ.get("PATH", "")

    for directory in search_path.split(os.pathsep):
        if not directory:
            continue
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            return candidate
    return None
