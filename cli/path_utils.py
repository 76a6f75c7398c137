# cli/path_utils.py

import os


def expand_path(path: str) -> str:
    """
    Expands `~` and returns an absolute path.

    Args:
        path (str): A possibly relative path string.

    Returns:
        The absolute, user-expanded form of `path` with surrounding whitespace removed.
    """
    return os.path.abspath(os.path.expanduser(path.strip()))


def resolve_data_dir(dir_path: str) -> str:
    """
    Produces and ensures a valid data directory for the storage file and exports.

    Args:
        dir_path (str): The configured directory path (may be relative or use `~`).

    Returns:
        A fully resolved directory path that exists on disk.

    Notes:
        - Creates the directory (including parent directories) if it does not exist.
    """
    data_dir = expand_path(dir_path)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir


def resolve_export_dir(default_dir: str, user_input: str | None) -> str:
    """
    Resolves the directory an export file is written to.

    Args:
        default_dir (str): The data directory, used when no input is given.
        user_input (str | None): An optional user-specified directory path.

    Returns:
        An existing directory path. Directories named by the user are created if needed.
    """
    export_dir = expand_path(user_input) if user_input is not None else default_dir

    os.makedirs(export_dir, exist_ok=True)

    return export_dir
