import os

import pytest

from anarchic_image_hosting_cli.errors import IOFailure
from anarchic_image_hosting_cli.files import display_name, read_payload


def test_read_payload_returns_all_bytes_and_name(tmp_path) -> None:
    content = bytes(range(256)) * 64
    path = tmp_path / "photo.png"
    path.write_bytes(content)

    payload = read_payload(path)

    assert payload.content == content
    assert payload.name == "photo.png"


def test_read_payload_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")

    assert read_payload(str(path)).content == b""


@pytest.mark.parametrize(
    "path,expected",
    (
        ("photo.png", "photo.png"),
        ("/var/images/cat.jpg", "cat.jpg"),
        ("images/./dog.gif", "dog.gif"),
        ("/", "unknown_file"),
        ("", "unknown_file"),
        ("images/..", "unknown_file"),
        (os.fsdecode(b"ph\xffoto.png"), "unknown_file"),
    ),
)
def test_display_name(path: str, expected: str) -> None:
    assert display_name(path) == expected


def test_read_payload_missing_file_raises(tmp_path) -> None:
    with pytest.raises(IOFailure) as exc_info:
        read_payload(tmp_path / "nope.png")

    assert "nope.png" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_read_payload_directory_raises(tmp_path) -> None:
    with pytest.raises(IOFailure):
        read_payload(tmp_path)
