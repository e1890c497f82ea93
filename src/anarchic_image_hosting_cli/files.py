from pathlib import Path
from typing import Union

from anarchic_image_hosting_cli.errors import IOFailure
from anarchic_image_hosting_cli.utils import FALLBACK_FILE_NAME, FilePayload


def display_name(path: Union[str, Path]) -> str:
    name = Path(path).name
    if not name or name == "..":
        return FALLBACK_FILE_NAME
    # Undecodable bytes arrive as surrogate escapes and cannot go into a header.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return FALLBACK_FILE_NAME
    return name


def read_payload(path: Union[str, Path]) -> FilePayload:
    """Read the whole file into memory before anything is sent."""
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise IOFailure(f"Failed to read {path}: {e.strerror or e}") from e
    return FilePayload(content=content, name=display_name(path))
