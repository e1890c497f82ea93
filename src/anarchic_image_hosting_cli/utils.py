from typing import Optional
from dataclasses import dataclass

CONFIG_FILE_NAME = "anarchic-image-hosting-cli.json5"
DEFAULT_ENDPOINT = "http://localhost:8080"
UPLOAD_SUFFIX = "/upload"
FALLBACK_FILE_NAME = "unknown_file"


# ========== Config & Models ==========
@dataclass(frozen=True)
class Configuration:
    log_level: Optional[str] = None
    endpoint: Optional[str] = None


@dataclass(frozen=True)
class ConfigResult:
    """Outcome of loading the config file.

    When ``available`` is False the file was missing or unusable, ``config``
    holds the fallback defaults and ``reason`` says what went wrong.
    """
    config: Configuration
    available: bool = True
    reason: Optional[str] = None

    @classmethod
    def unavailable(cls, reason: str) -> "ConfigResult":
        return cls(config=Configuration(log_level="error"), available=False, reason=reason)

    @property
    def effective_log_level(self) -> str:
        if not self.available:
            return "error"
        return self.config.log_level or "info"


@dataclass(frozen=True)
class FilePayload:
    content: bytes
    name: str


@dataclass(frozen=True)
class UploadOutcome:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
