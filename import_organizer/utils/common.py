from pathlib import Path


def read_file_content(file_path: Path) -> str:
    """Read file content with encoding fallback."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        with open(file_path, 'r', encoding='latin1') as f:
            return f.read()


def display_path(path: Path, root: Path) -> str:
    """Root-relative POSIX path for log lines, absolute when outside the root."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
