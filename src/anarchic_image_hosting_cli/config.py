from pathlib import Path
from typing import Optional, Union

import json5

from anarchic_image_hosting_cli.utils import (
    CONFIG_FILE_NAME,
    DEFAULT_ENDPOINT,
    UPLOAD_SUFFIX,
    ConfigResult,
    Configuration,
)

_STRING_KEYS = ("log_level", "endpoint")


def load_config(path: Union[str, Path] = CONFIG_FILE_NAME) -> ConfigResult:
    """Load the optional JSON5 settings file.

    A relative ``path`` is looked up in the current working directory. Any
    problem with the file discards it entirely and yields the defaults variant;
    nothing is raised.
    """
    try:
        with open(path, "r", encoding="utf-8") as fp:
            raw = json5.load(fp)
    except OSError as e:
        return ConfigResult.unavailable(f"{path}: {e.strerror or e}")
    except ValueError as e:
        # json5 parse errors and UnicodeDecodeError both land here
        return ConfigResult.unavailable(f"Unable to parse config file {path}: {e}")

    if not isinstance(raw, dict):
        return ConfigResult.unavailable(f"Unable to parse config file {path}: top level must be an object")

    for key in _STRING_KEYS:
        value = raw.get(key)
        if value is not None and not isinstance(value, str):
            return ConfigResult.unavailable(
                f"Unable to parse config file {path}: '{key}' must be a string"
            )

    return ConfigResult(config=Configuration(log_level=raw.get("log_level"), endpoint=raw.get("endpoint")))


def resolve_endpoint(cli_url: Optional[str], config_endpoint: Optional[str]) -> str:
    # The base is an opaque string, it is not validated.
    base = cli_url if cli_url is not None else config_endpoint
    if base is None:
        base = DEFAULT_ENDPOINT
    return base + UPLOAD_SUFFIX
