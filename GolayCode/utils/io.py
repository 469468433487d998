"""
File I/O utilities for GolayCode.
"""

import os


def read_bytes(filepath: str) -> bytes:
    """
    Reads a whole file.

    Args:
        filepath: Path of the file

    Returns:
        File contents
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "rb") as f:
        return f.read()

def write_bytes(filepath: str, data: bytes) -> str:
    """
    Writes data to a file, creating its directory if needed.

    Returns:
        The path written to
    """
    ensure_dir(os.path.dirname(filepath) or ".")
    with open(filepath, "wb") as f:
        f.write(data)
    return filepath

def ensure_dir(path: str) -> str:
    """Ensures that a directory exists. Create it if it doesn't."""
    os.makedirs(path, exist_ok=True)
    return path
