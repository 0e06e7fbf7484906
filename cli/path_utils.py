# cli/path_utils.py

import os


def get_data_dir(user_input: str | None) -> str:
    """
    Resolves the directory holding the exam history based on user input or default location.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        A resolved path string. If user input is provided, it is expanded and returned directly.
        Otherwise, defaults to: `~/Documents/ExamHistory`.
    """
    if user_input is not None and user_input.strip():
        return os.path.abspath(os.path.expanduser(user_input.strip()))
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        return os.path.join(documents, "ExamHistory")


def resolve_data_dir(dir_input: str | None) -> str:
    """
    Produces and ensures a valid data directory for the exam history.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    data_dir = get_data_dir(dir_input)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir


def resolve_export_path(dir_input: str | None, default_dir: str, filename: str) -> str:
    """
    Builds the path an export artifact is written to.

    Args:
        dir_input (str | None): A user-specified directory. If None or blank, `default_dir` is used.
        default_dir (str): The fallback directory (normally the data directory).
        filename (str): The artifact's file name.

    Returns:
        The full target path. The target directory is created if it does not exist.
    """
    if dir_input is not None and dir_input.strip():
        target_dir = os.path.abspath(os.path.expanduser(dir_input.strip()))
    else:
        target_dir = default_dir

    os.makedirs(target_dir, exist_ok=True)

    return os.path.join(target_dir, filename)


def write_bytes(path: str, content: bytes) -> None:
    # intentionally overwrites an existing export
    with open(path, "wb") as f:
        f.write(content)


def read_text(path: str) -> str:
    with open(os.path.abspath(os.path.expanduser(path)), "r", encoding="utf-8") as f:
        return f.read()
